"""Tests for ReadWriteLock."""

import threading
import time

from chronicle.audit.stores import ReadWriteLock


class TestReadWriteLock:
    """Tests for shared and exclusive locking."""

    def test_readers_share(self) -> None:
        """Two readers should hold the lock at the same time."""
        lock = ReadWriteLock()
        inside = threading.Barrier(2, timeout=5)

        def read() -> None:
            with lock.read():
                inside.wait()

        threads = [threading.Thread(target=read) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert not inside.broken

    def test_writer_excludes_readers(self) -> None:
        """A reader should wait until the writer releases."""
        lock = ReadWriteLock()
        order: list[str] = []
        writer_in = threading.Event()

        def write() -> None:
            with lock.write():
                writer_in.set()
                time.sleep(0.05)
                order.append("write")

        def read() -> None:
            writer_in.wait()
            with lock.read():
                order.append("read")

        threads = [threading.Thread(target=write), threading.Thread(target=read)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert order == ["write", "read"]

    def test_writers_exclusive(self) -> None:
        """Writers should never overlap."""
        lock = ReadWriteLock()
        active = 0
        overlaps = 0
        guard = threading.Lock()

        def write() -> None:
            nonlocal active, overlaps
            for _ in range(50):
                with lock.write():
                    with guard:
                        active += 1
                        if active > 1:
                            overlaps += 1
                    with guard:
                        active -= 1

        threads = [threading.Thread(target=write) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert overlaps == 0

    def test_released_after_exception(self) -> None:
        """Exceptions inside the block should release the lock."""
        lock = ReadWriteLock()
        try:
            with lock.write():
                raise ValueError("boom")
        except ValueError:
            pass
        with lock.write():
            pass
        with lock.read():
            pass
