"""Event model for the audit domain."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from chronicle.audit.models.value import Value


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Action(str, Enum):
    """Lifecycle action recorded by an event."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Event(BaseModel):
    """Immutable fact about an action taken on an entity.

    Events are write-once: stores append them and never mutate them.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(
        default_factory=utc_now, description="Creation instant"
    )
    action: Action = Field(..., description="Lifecycle action")
    author: str = Field(..., description="Actor identifier")
    description: str = Field(..., description="Human-readable summary")
    payload: dict[str, Value] = Field(
        default_factory=dict, description="Field name to value"
    )
