"""Validation domain module.

Advisory validation of orders, design jobs and line items: pure check
functions grouped per entity type, plus the engine that runs them and
aggregates the outcomes. Nothing in this package touches the database.
"""

from .models import (
    CheckResult,
    CheckType,
    EntityType,
    RunSummary,
    ValidationContext,
    ValidationRunResult,
    ValidationSeverity,
    ValidationStatus,
)
from .port import ValidatorPort
from .engine import ValidationEngine, summarize, overall_status, not_found_result

__all__ = [
    "CheckResult",
    "CheckType",
    "EntityType",
    "RunSummary",
    "ValidationContext",
    "ValidationRunResult",
    "ValidationSeverity",
    "ValidationStatus",
    "ValidatorPort",
    "ValidationEngine",
    "summarize",
    "overall_status",
    "not_found_result",
]
