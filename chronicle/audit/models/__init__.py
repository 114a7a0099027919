"""Audit domain models.

Contains all Pydantic models for the audit trail:
- Value and Event for stored facts
- Change and ChangeField for reconstructed history
"""

from chronicle.audit.models.change import Change, ChangeField
from chronicle.audit.models.event import Action, Event, utc_now
from chronicle.audit.models.value import Value, hidden_value, plain_value

__all__ = [
    "Action",
    "Change",
    "ChangeField",
    "Event",
    "Value",
    "hidden_value",
    "plain_value",
    "utc_now",
]
