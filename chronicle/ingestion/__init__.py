"""Ingestion: feed structured log records into the audit trail."""

from chronicle.ingestion.extractors import (
    ATTR_ACTION,
    ATTR_AUTHOR,
    ATTR_ENTITY,
    ATTR_USER,
    DEFAULT_AUTHOR,
    RESERVED_KEYS,
    attr_extractor,
    default_action_extractor,
    default_author_extractor,
    default_payload_extractor,
)
from chronicle.ingestion.processor import (
    AUDIT_ERROR_KEY,
    AuditProcessor,
    create_audit_processor,
    level_filter,
)

__all__ = [
    "ATTR_ACTION",
    "ATTR_AUTHOR",
    "ATTR_ENTITY",
    "ATTR_USER",
    "AUDIT_ERROR_KEY",
    "DEFAULT_AUTHOR",
    "RESERVED_KEYS",
    "AuditProcessor",
    "attr_extractor",
    "create_audit_processor",
    "default_action_extractor",
    "default_author_extractor",
    "default_payload_extractor",
    "level_filter",
]
