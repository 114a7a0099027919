"""AuditStore factory for creating backend instances from configuration."""

from chronicle.audit.store import AuditStore
from chronicle.audit.stores.inmemory import InMemoryAuditStore
from chronicle.audit.stores.jsonfile import JsonFileAuditStore
from chronicle.config.models import AuditStoreConfig
from chronicle.exceptions import ConfigurationError
from chronicle.observability.logging import get_logger

logger = get_logger(__name__)


def create_audit_store(config: AuditStoreConfig) -> AuditStore:
    """Create an AuditStore instance based on configuration.

    Args:
        config: Audit store configuration from settings

    Returns:
        Configured AuditStore instance

    Raises:
        ConfigurationError: If the backend is unknown or misconfigured
    """
    backend = config.backend

    if backend == "inmemory":
        logger.info("creating_audit_store", backend="inmemory")
        return InMemoryAuditStore()

    elif backend == "jsonfile":
        if config.path is None:
            raise ConfigurationError("jsonfile audit store requires a path")
        logger.info("creating_audit_store", backend="jsonfile", path=str(config.path))
        return JsonFileAuditStore(config.path)

    raise ConfigurationError(f"Unsupported audit store backend: {backend}")
