"""Structlog processor that mirrors log records into the audit trail.

Install AuditProcessor in the structlog chain. Records whose attributes
resolve to an entity key become audit events; the record itself passes
through unchanged, so regular log output is unaffected. Recording
failures are counted and annotated on the record, never raised into the
logging call.
"""

from collections.abc import Callable, Collection
from contextvars import ContextVar
from functools import partial

from structlog.types import EventDict, WrappedLogger

from chronicle.audit.engine import AuditLogger
from chronicle.config.models import IngestionConfig
from chronicle.exceptions import ConfigurationError
from chronicle.ingestion.extractors import (
    RESERVED_KEYS,
    ActionExtractor,
    AuthorExtractor,
    KeyExtractor,
    PayloadExtractor,
    attr_extractor,
    default_action_extractor,
    default_author_extractor,
    default_payload_extractor,
)
from chronicle.observability.logging import APP_KEY, LEVELS
from chronicle.observability.metrics import AUDIT_INGESTION_ERRORS, AUDIT_RECORDS_SKIPPED

ShouldAudit = Callable[[str, EventDict], bool]

# Keys added by structlog or bootstrap rather than by the caller
BOOKKEEPING_KEYS: frozenset[str] = frozenset({"event", "level", "timestamp", "logger", APP_KEY})

AUDIT_ERROR_KEY = "audit_error"

# Set while the processor is recording, so log lines emitted by the
# audit path itself are not audited again.
_recording: ContextVar[bool] = ContextVar("chronicle_audit_recording", default=False)


def level_filter(min_level: str) -> ShouldAudit:
    """Build a should_audit predicate accepting records at or above min_level."""
    threshold = LEVELS[min_level.upper()]
    aliases = {"warn": "WARNING", "exception": "ERROR", "fatal": "CRITICAL"}

    def should_audit(method_name: str, event_dict: EventDict) -> bool:
        level = event_dict.get("level") or aliases.get(method_name, method_name)
        return LEVELS.get(str(level).upper(), 0) >= threshold

    return should_audit


class AuditProcessor:
    """Structlog processor that records matching log events.

    Args:
        logger: Audit logger receiving the events
        key_extractor: Resolves the entity key from record attributes;
            a None result skips the record. Required.
        should_audit: Predicate over (method_name, event_dict); all
            records are considered when omitted
        action_extractor: Defaults to the "action" attribute, else create
        author_extractor: Defaults to "author" or "user", else "system"
        payload_extractor: Defaults to every non-reserved attribute

    Raises:
        ConfigurationError: If key_extractor is missing
    """

    def __init__(
        self,
        logger: AuditLogger,
        key_extractor: KeyExtractor | None,
        *,
        should_audit: ShouldAudit | None = None,
        action_extractor: ActionExtractor | None = None,
        author_extractor: AuthorExtractor | None = None,
        payload_extractor: PayloadExtractor | None = None,
    ) -> None:
        if key_extractor is None:
            raise ConfigurationError("AuditProcessor requires a key_extractor")

        self._logger = logger
        self._key_extractor = key_extractor
        self._should_audit = should_audit
        self._action_extractor = action_extractor or default_action_extractor
        self._author_extractor = author_extractor or default_author_extractor
        self._payload_extractor = payload_extractor or default_payload_extractor

    def __call__(
        self,
        _logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Record the event if it qualifies and pass it on unchanged."""
        if _recording.get():
            return event_dict

        if self._should_audit is not None and not self._should_audit(method_name, event_dict):
            AUDIT_RECORDS_SKIPPED.labels(reason="filtered").inc()
            return event_dict

        attrs = {k: v for k, v in event_dict.items() if k not in BOOKKEEPING_KEYS}

        token = _recording.set(True)
        try:
            key = self._key_extractor(attrs)
            if key is None:
                AUDIT_RECORDS_SKIPPED.labels(reason="no_key").inc()
                return event_dict

            self._logger.log_change(
                key,
                self._action_extractor(attrs),
                self._author_extractor(attrs),
                str(event_dict.get("event", "")),
                self._payload_extractor(attrs),
            )
        except Exception as e:  # noqa: BLE001 - audit must not break logging
            AUDIT_INGESTION_ERRORS.inc()
            event_dict[AUDIT_ERROR_KEY] = f"{type(e).__name__}: {e}"
        finally:
            _recording.reset(token)

        return event_dict


def create_audit_processor(logger: AuditLogger, config: IngestionConfig) -> AuditProcessor:
    """Build an AuditProcessor from ingestion settings."""
    reserved: Collection[str] = RESERVED_KEYS | {config.key_attribute, *config.extra_reserved_keys}
    return AuditProcessor(
        logger,
        attr_extractor(config.key_attribute),
        should_audit=level_filter(config.min_level),
        author_extractor=partial(default_author_extractor, default=config.default_author),
        payload_extractor=partial(default_payload_extractor, reserved=reserved),
    )
