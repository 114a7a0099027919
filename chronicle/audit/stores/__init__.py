"""Audit store backends."""

from chronicle.audit.store import AuditStore
from chronicle.audit.stores.factory import create_audit_store
from chronicle.audit.stores.inmemory import InMemoryAuditStore
from chronicle.audit.stores.jsonfile import JsonFileAuditStore
from chronicle.audit.stores.locking import ReadWriteLock

__all__ = [
    "AuditStore",
    "InMemoryAuditStore",
    "JsonFileAuditStore",
    "ReadWriteLock",
    "create_audit_store",
]
