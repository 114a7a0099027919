"""Audit store and ingestion configuration models."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

StoreBackendType = Literal["inmemory", "jsonfile"]
IngestionLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AuditStoreConfig(BaseModel):
    """Configuration for the audit event store backend."""

    backend: StoreBackendType = Field(
        default="inmemory",
        description="Storage backend type",
    )
    path: Path | None = Field(
        default=None,
        description="History file for the jsonfile backend",
    )


class AuditConfig(BaseModel):
    """Audit trail configuration."""

    store: AuditStoreConfig = Field(
        default_factory=AuditStoreConfig,
        description="Event store settings",
    )


class IngestionConfig(BaseModel):
    """Configuration for feeding structured log records into the audit trail."""

    enabled: bool = Field(default=False, description="Install the audit processor")
    key_attribute: str = Field(
        default="entity",
        description="Log attribute holding the audited entity key",
    )
    default_author: str = Field(
        default="system",
        description="Author recorded when a log record names none",
    )
    min_level: IngestionLevel = Field(
        default="INFO",
        description="Lowest log level recorded in the audit trail",
    )
    extra_reserved_keys: list[str] = Field(
        default_factory=list,
        description="Additional attributes never copied into the payload",
    )
