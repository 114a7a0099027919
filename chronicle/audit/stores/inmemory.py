"""In-memory implementation of AuditStore."""

from chronicle.audit.models import Event
from chronicle.audit.store import AuditStore
from chronicle.audit.stores.locking import ReadWriteLock


class InMemoryAuditStore(AuditStore):
    """In-memory implementation of AuditStore.

    Keeps a dict of key to event list behind a readers-writer lock.
    Used by default when an AuditLogger is created without a store.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._lock = ReadWriteLock()
        self._events: dict[str, list[Event]] = {}

    def store(self, key: str, event: Event) -> None:
        """Append an event for key."""
        with self._lock.write():
            self._events.setdefault(key, []).append(event)

    def get(self, key: str) -> list[Event]:
        """Get a copy of the events for key."""
        with self._lock.read():
            return list(self._events.get(key, ()))

    def has(self, key: str) -> bool:
        """Check whether key has stored events."""
        with self._lock.read():
            return key in self._events

    def clear(self, key: str) -> None:
        """Remove all events for key."""
        with self._lock.write():
            self._events.pop(key, None)

    def keys(self) -> list[str]:
        """List keys with stored history."""
        with self._lock.read():
            return list(self._events)
