"""Configuration models for Chronicle."""

from chronicle.config.models.audit import AuditConfig, AuditStoreConfig, IngestionConfig
from chronicle.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "AuditConfig",
    "AuditStoreConfig",
    "IngestionConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
