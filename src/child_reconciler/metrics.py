"""Prometheus metrics for the child resource reconciler."""

from prometheus_client import Counter, Histogram

# Reconciliation metrics
reconcile_total = Counter(
    "child_reconciler_reconcile_total",
    "Total number of child reconciliations",
    ["kind", "result"],
)

reconcile_duration_seconds = Histogram(
    "child_reconciler_reconcile_duration_seconds",
    "Duration of child reconciliations in seconds",
    ["kind"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
)

# Specification drift between observed and desired children
drift_detected_total = Counter(
    "child_reconciler_drift_detected_total",
    "Total number of specification drift detections",
    ["kind"],
)

# Error metrics
error_total = Counter(
    "child_reconciler_error_total",
    "Total number of reconciliation errors",
    ["kind", "error_type"],
)

# API call metrics
api_call_total = Counter(
    "child_reconciler_api_call_total",
    "Total number of API calls",
    ["api_type", "operation", "result"],
)

api_call_duration_seconds = Histogram(
    "child_reconciler_api_call_duration_seconds",
    "Duration of API calls in seconds",
    ["api_type", "operation"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
)

rate_limit_hits_total = Counter(
    "child_reconciler_rate_limit_hits_total",
    "Total number of rate limit hits",
    ["api_type"],
)

# Event emission failures (events are best effort)
event_emit_failures_total = Counter(
    "child_reconciler_event_emit_failures_total",
    "Total number of events that could not be posted",
    ["reason"],
)
