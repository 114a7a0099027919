"""Audit trail: events, stores and change-history reconstruction."""

from chronicle.audit.engine import HIDE_TEXT, AuditLogger
from chronicle.audit.models import (
    Action,
    Change,
    ChangeField,
    Event,
    Value,
    hidden_value,
    plain_value,
)
from chronicle.audit.store import AuditStore
from chronicle.audit.stores import InMemoryAuditStore, JsonFileAuditStore

__all__ = [
    "HIDE_TEXT",
    "Action",
    "AuditLogger",
    "AuditStore",
    "Change",
    "ChangeField",
    "Event",
    "InMemoryAuditStore",
    "JsonFileAuditStore",
    "Value",
    "hidden_value",
    "plain_value",
]
