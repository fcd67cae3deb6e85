"""Prometheus metrics for the ops backend.

Defines and exposes operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter, Histogram

# Validation run metrics
validation_runs_total = Counter(
    "richhabits_validation_runs_total",
    "Total validation runs",
    ["entity_type", "overall_status"]  # overall_status: pass|warning|error|unable
)

validation_checks_total = Counter(
    "richhabits_validation_checks_total",
    "Validation check outcomes",
    ["check_type", "status"]
)

validation_run_duration_seconds = Histogram(
    "richhabits_validation_run_duration_seconds",
    "Time spent running and persisting a validation run in seconds",
    ["entity_type"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

# Retention of stale results
validation_results_expired_total = Counter(
    "richhabits_validation_results_expired_total",
    "Expired validation results deleted by cleanup"
)
