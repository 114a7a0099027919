"""Payload value model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Value(BaseModel):
    """A single payload datum.

    When hidden is set the data is never exposed in reconstructed
    history; only the fact that the field was touched is reported.
    """

    model_config = ConfigDict(frozen=True)

    data: Any = Field(default=None, description="Semantic value")
    hidden: bool = Field(default=False, description="Redact from history")


def plain_value(data: Any) -> Value:
    """Create a visible value."""
    return Value(data=data)


def hidden_value() -> Value:
    """Create a redacted value, shown as the mask in history."""
    return Value(hidden=True)
