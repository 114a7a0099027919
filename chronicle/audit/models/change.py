"""Derived change-history models.

These are computed on every read from the stored events and are
never persisted.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChangeField(BaseModel):
    """Before/after values of one field within one event.

    from_ is None when the field had no prior visible value.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Field name")
    from_: Any = Field(default=None, description="Previous visible value")
    to: Any = Field(default=None, description="New value")


class Change(BaseModel):
    """Per-event view of the fields whose visible state changed."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Copied from the event")
    author: str = Field(..., description="Copied from the event")
    timestamp: datetime = Field(..., description="Copied from the event")
    fields: list[ChangeField] = Field(
        default_factory=list, description="Changed fields in payload order"
    )

    def get(self, field: str) -> ChangeField | None:
        """Return the change for a field, or None if it did not change."""
        for change_field in self.fields:
            if change_field.field == field:
                return change_field
        return None
