"""AuditStore abstract interface."""

from abc import ABC, abstractmethod

from chronicle.audit.models import Event


class AuditStore(ABC):
    """Abstract interface for audit event storage.

    An append-only sequence of events per key. Implementations must be
    safe to call from multiple threads, preserve per-key append order,
    and return snapshots that later appends cannot modify.
    """

    @abstractmethod
    def store(self, key: str, event: Event) -> None:
        """Append an event to the sequence for key."""
        pass

    @abstractmethod
    def get(self, key: str) -> list[Event]:
        """Get all events for key in append order.

        Returns an empty list for unknown keys.
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether any events are stored for key."""
        pass

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the whole history for key. No-op for unknown keys."""
        pass
