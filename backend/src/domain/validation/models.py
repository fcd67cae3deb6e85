"""Validation models and enums for the advisory validation layer"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class ValidationStatus(str, Enum):
    """Outcome of a single check (or of a whole run)"""
    PASS = "pass"
    WARNING = "warning"
    ERROR = "error"
    SKIPPED = "skipped"
    UNABLE = "unable"


class ValidationSeverity(str, Enum):
    """How loudly a check outcome should be surfaced"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class EntityType(str, Enum):
    """Entities the validation layer knows how to check"""
    ORDER = "order"
    DESIGN_JOB = "design_job"
    LINE_ITEM = "line_item"


class CheckType(str, Enum):
    """Catalogue of validation checks.

    The totals and manufacturer identifiers are published for clients but no
    rule evaluates them.
    """
    # Order checks
    ORDER_HAS_CUSTOMER_INFO = "order_has_customer_info"
    ORDER_HAS_SHIPPING_ADDRESS = "order_has_shipping_address"
    ORDER_HAS_LINE_ITEMS = "order_has_line_items"
    ORDER_LINE_ITEMS_HAVE_SIZES = "order_line_items_have_sizes"
    ORDER_HAS_DESIGN_APPROVAL = "order_has_design_approval"
    ORDER_HAS_DEPOSIT = "order_has_deposit"
    ORDER_TOTAL_MATCHES_LINE_ITEMS = "order_total_matches_line_items"
    ORDER_HAS_MANUFACTURER_ASSIGNED = "order_has_manufacturer_assigned"
    ORDER_EST_DELIVERY_IS_FUTURE = "order_est_delivery_is_future"

    # Design job checks
    DESIGN_JOB_HAS_BRIEF = "design_job_has_brief"
    DESIGN_JOB_HAS_REFERENCE_FILES = "design_job_has_reference_files"
    DESIGN_JOB_HAS_DESIGNER = "design_job_has_designer"
    DESIGN_JOB_HAS_DEADLINE = "design_job_has_deadline"
    DESIGN_JOB_DEADLINE_NOT_PAST = "design_job_deadline_not_past"
    DESIGN_JOB_HAS_RENDITIONS = "design_job_has_renditions"

    # Line item checks
    LINE_ITEM_HAS_VARIANT = "line_item_has_variant"
    LINE_ITEM_HAS_SIZES = "line_item_has_sizes"
    LINE_ITEM_SIZE_TOTAL_MATCHES = "line_item_size_total_matches"
    LINE_ITEM_HAS_MANUFACTURER = "line_item_has_manufacturer"

    # Reported when the entity itself could not be loaded
    ENTITY_EXISTS = "entity_exists"


@dataclass
class CheckResult:
    """Outcome of one check against one entity.

    This is the domain model (not the database model); the repository turns
    it into a validation_results row.
    """
    check_type: CheckType
    status: ValidationStatus
    severity: ValidationSeverity
    message: str
    details: Optional[dict[str, Any]] = None
    suggested_action: Optional[str] = None
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "check_type": self.check_type.value,
            "status": self.status.value,
            "severity": self.severity.value,
            "message": self.message,
            "details": self.details,
            "suggested_action": self.suggested_action,
            "related_entity_type": self.related_entity_type,
            "related_entity_id": self.related_entity_id,
        }


@dataclass
class RunSummary:
    """Per-status counts for one validation run.

    `skipped` counts both SKIPPED and UNABLE outcomes.
    """
    total_checks: int = 0
    passed: int = 0
    warnings: int = 0
    errors: int = 0
    skipped: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_checks": self.total_checks,
            "passed": self.passed,
            "warnings": self.warnings,
            "errors": self.errors,
            "skipped": self.skipped,
        }


@dataclass
class ValidationRunResult:
    """Everything a caller gets back from running validation on an entity."""
    entity_type: str
    entity_id: str
    overall_status: ValidationStatus
    results: list[CheckResult] = field(default_factory=list)
    summary: RunSummary = field(default_factory=RunSummary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "overall_status": self.overall_status.value,
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
        }


@dataclass
class ValidationContext:
    """Context object passed to validation rules.

    Rules never read the wall clock; `now` is captured once per run so
    every check in the run agrees on what "past" means.
    """
    now: datetime
    line_items: list[Any] = field(default_factory=list)
