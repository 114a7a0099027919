"""Prometheus metrics for Chronicle."""

from prometheus_client import Counter, Histogram

AUDIT_EVENTS_STORED = Counter(
    "chronicle_audit_events_stored_total",
    "Total number of audit events appended",
    labelnames=["action"],
)

AUDIT_LOGS_REPLAY_SIZE = Histogram(
    "chronicle_audit_logs_replay_events",
    "Number of events replayed per change-history reconstruction",
    buckets=(0, 1, 5, 10, 50, 100, 500, 1000, 5000),
)

AUDIT_RECORDS_SKIPPED = Counter(
    "chronicle_audit_records_skipped_total",
    "Log records not sent to the audit trail",
    labelnames=["reason"],
)

AUDIT_INGESTION_ERRORS = Counter(
    "chronicle_audit_ingestion_errors_total",
    "Log records whose audit recording failed",
)
