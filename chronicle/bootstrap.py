"""Bootstrap module for wiring Chronicle from configuration.

Handles:
- Loading configuration from TOML files and environment
- Creating the configured audit store and AuditLogger
- Configuring structlog, with the audit processor when ingestion is enabled
- Binding the application name into every log line

Example usage:

    from chronicle.bootstrap import bootstrap

    audit = bootstrap()
    audit.create("order:1", "user", "Order created", {"status": plain_value("pending")})
"""

import structlog

from chronicle.audit.engine import AuditLogger
from chronicle.audit.stores import create_audit_store
from chronicle.config import Settings, get_settings
from chronicle.ingestion import create_audit_processor
from chronicle.observability.logging import APP_KEY, get_logger, setup_logging

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> AuditLogger:
    """Create an AuditLogger and configure logging from settings.

    Args:
        settings: Settings to use; loaded from config files when omitted

    Returns:
        AuditLogger over the configured store
    """
    settings = settings or get_settings()

    audit = AuditLogger(create_audit_store(settings.audit.store))

    log_config = settings.observability.logging
    extra = []
    if settings.ingestion.enabled:
        extra.append(create_audit_processor(audit, settings.ingestion))
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
        extra_processors=extra,
    )
    structlog.contextvars.bind_contextvars(**{APP_KEY: settings.app_name})

    logger.info(
        "chronicle_bootstrapped",
        store_backend=settings.audit.store.backend,
        ingestion_enabled=settings.ingestion.enabled,
    )
    return audit
