"""Logging, request correlation, metrics and health checks."""

from .logging_config import configure_logging, get_logger
from .metrics import (
    validation_runs_total,
    validation_checks_total,
    validation_run_duration_seconds,
    validation_results_expired_total,
)
from .request_id import request_id_var, get_request_id, set_request_id, generate_request_id
from .health import HealthStatus, ComponentHealth
from .middleware import RequestIDMiddleware

__all__ = [
    "configure_logging",
    "get_logger",
    "validation_runs_total",
    "validation_checks_total",
    "validation_run_duration_seconds",
    "validation_results_expired_total",
    "request_id_var",
    "get_request_id",
    "set_request_id",
    "generate_request_id",
    "HealthStatus",
    "ComponentHealth",
    "RequestIDMiddleware",
]
