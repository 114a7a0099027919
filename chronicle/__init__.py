"""Chronicle: field-level audit trail engine.

Records create/update/delete events against named entities and
reconstructs a per-field change history, with redaction of hidden
fields.
"""

from chronicle.audit import (
    HIDE_TEXT,
    Action,
    AuditLogger,
    AuditStore,
    Change,
    ChangeField,
    Event,
    InMemoryAuditStore,
    Value,
    hidden_value,
    plain_value,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "HIDE_TEXT",
    "Action",
    "AuditLogger",
    "AuditStore",
    "Change",
    "ChangeField",
    "Event",
    "InMemoryAuditStore",
    "Value",
    "hidden_value",
    "plain_value",
]
