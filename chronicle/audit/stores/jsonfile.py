"""JSON file implementation of AuditStore.

The whole history is held in memory and the file is rewritten after
every append or clear. Suitable for small deployments and tooling, not
for high write volumes.

Payload data that JSON cannot represent is written as its repr, so a
reloaded history carries that string in place of the original object.
"""

import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from chronicle.audit.models import Event
from chronicle.audit.stores.inmemory import InMemoryAuditStore
from chronicle.exceptions import StorageError
from chronicle.observability.logging import get_logger

logger = get_logger(__name__)

_HISTORY = TypeAdapter(dict[str, list[Event]])


class JsonFileAuditStore(InMemoryAuditStore):
    """AuditStore persisted to a single JSON file."""

    def __init__(self, path: str | Path) -> None:
        """Load existing history from path, if the file exists.

        Raises:
            StorageError: If the file exists but cannot be read or parsed
        """
        super().__init__()
        self._path = Path(path)
        self._events = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def store(self, key: str, event: Event) -> None:
        """Append an event for key and persist.

        The in-memory history is rolled back if the file cannot be written.
        """
        with self._lock.write():
            events = self._events.setdefault(key, [])
            events.append(event)
            try:
                self._save()
            except StorageError:
                events.pop()
                if not events:
                    del self._events[key]
                raise

    def clear(self, key: str) -> None:
        """Remove all events for key and persist.

        The history is restored if the file cannot be written.
        """
        with self._lock.write():
            events = self._events.pop(key, None)
            if events is None:
                return
            try:
                self._save()
            except StorageError:
                self._events[key] = events
                raise

    def _load(self) -> dict[str, list[Event]]:
        if not self._path.exists():
            return {}
        try:
            history = _HISTORY.validate_json(self._path.read_bytes())
        except (OSError, ValidationError) as e:
            raise StorageError(f"Cannot load audit history from {self._path}: {e}") from e
        logger.debug(
            "audit_history_loaded",
            path=str(self._path),
            keys=len(history),
        )
        return history

    def _save(self) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            data = _HISTORY.dump_json(self._events, indent=2, fallback=repr)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, self._path)
        # PydanticSerializationError is a ValueError
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot write audit history to {self._path}: {e}") from e
