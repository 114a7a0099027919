"""AuditLogger: records events and reconstructs field-level history.

The logger holds no state of its own beyond its store handle. Every read
replays the key's full event sequence, so history always reflects what
the store currently holds.
"""

from collections.abc import Mapping
from typing import Any

from chronicle.audit.canonical import same_value
from chronicle.audit.models import Action, Change, ChangeField, Event, Value, utc_now
from chronicle.audit.store import AuditStore
from chronicle.audit.stores.inmemory import InMemoryAuditStore
from chronicle.observability.logging import get_logger
from chronicle.observability.metrics import AUDIT_EVENTS_STORED, AUDIT_LOGS_REPLAY_SIZE

logger = get_logger(__name__)

HIDE_TEXT = "***"

Payload = Mapping[str, Value]


class AuditLogger:
    """Thread-safe audit trail over a pluggable AuditStore.

    Usage:
        audit = AuditLogger()
        audit.create("user:1", "admin", "User created", {
            "email": plain_value("user@example.com"),
            "password": hidden_value(),
        })
        history = audit.logs("user:1")
    """

    def __init__(self, store: AuditStore | None = None) -> None:
        """Create a logger over store, or over a private in-memory store."""
        self._store = store if store is not None else InMemoryAuditStore()

    @property
    def store(self) -> AuditStore:
        return self._store

    def log_change(
        self,
        key: str,
        action: Action,
        author: str,
        description: str,
        payload: Payload | None = None,
    ) -> Event:
        """Record an event for key and return it.

        The payload is not validated; an empty payload is legal.
        """
        event = Event(
            timestamp=utc_now(),
            action=action,
            author=author,
            description=description,
            payload=dict(payload or {}),
        )
        self._store.store(key, event)
        AUDIT_EVENTS_STORED.labels(action=event.action.value).inc()
        logger.debug(
            "audit_event_stored",
            audit_key=key,
            audit_action=event.action.value,
            audit_author=author,
            field_count=len(event.payload),
        )
        return event

    def create(
        self, key: str, author: str, description: str, payload: Payload | None = None
    ) -> Event:
        return self.log_change(key, Action.CREATE, author, description, payload)

    def update(
        self, key: str, author: str, description: str, payload: Payload | None = None
    ) -> Event:
        return self.log_change(key, Action.UPDATE, author, description, payload)

    def delete(
        self, key: str, author: str, description: str, payload: Payload | None = None
    ) -> Event:
        return self.log_change(key, Action.DELETE, author, description, payload)

    def has(self, key: str) -> bool:
        """Check whether key has any recorded history."""
        return self._store.has(key)

    def clear(self, key: str) -> None:
        """Drop the whole history of key. Administrative use only."""
        self._store.clear(key)
        logger.info("audit_history_cleared", audit_key=key)

    def events(self, key: str, *fields: str) -> list[Event]:
        """Get the events for key, optionally filtered by payload fields.

        Without fields, every event is returned with a copied payload.
        With fields, only events carrying at least one of them are
        returned, and each payload is reduced to the requested fields
        it actually contains.
        """
        events = self._store.get(key)

        if not fields:
            return [
                event.model_copy(update={"payload": dict(event.payload)})
                for event in events
            ]

        wanted = frozenset(fields)
        filtered: list[Event] = []
        for event in events:
            payload = {
                name: value
                for name, value in event.payload.items()
                if name in wanted
            }
            if payload:
                filtered.append(event.model_copy(update={"payload": payload}))
        return filtered

    def logs(self, key: str) -> list[Change]:
        """Reconstruct the field-level change history of key.

        One Change per event, in storage order. A visible field appears
        only when its value differs from the last visible value seen for
        it. A hidden field appears every time, masked on both sides, and
        never enters the running state, so the next visible write to it
        reports no prior value.
        """
        events = self._store.get(key)
        AUDIT_LOGS_REPLAY_SIZE.observe(len(events))

        state: dict[str, Any] = {}
        result: list[Change] = []
        for event in events:
            fields: list[ChangeField] = []
            for name, value in event.payload.items():
                if value.hidden:
                    fields.append(ChangeField(field=name, from_=HIDE_TEXT, to=HIDE_TEXT))
                    continue

                old = state.get(name)
                if same_value(old, value.data):
                    continue
                fields.append(ChangeField(field=name, from_=old, to=value.data))
                state[name] = value.data

            result.append(
                Change(
                    description=event.description,
                    author=event.author,
                    timestamp=event.timestamp,
                    fields=fields,
                )
            )
        return result
