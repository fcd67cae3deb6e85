"""Line item validation rules"""

from typing import Any

from ..models import (
    CheckResult,
    CheckType,
    ValidationStatus,
    ValidationSeverity,
    ValidationContext
)
from .common import total_units


def check_line_item_has_variant(line_item: Any, context: ValidationContext) -> CheckResult:
    if line_item.variant_id:
        return CheckResult(
            check_type=CheckType.LINE_ITEM_HAS_VARIANT,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Product variant is assigned",
            related_entity_type="product_variant",
            related_entity_id=str(line_item.variant_id),
        )

    return CheckResult(
        check_type=CheckType.LINE_ITEM_HAS_VARIANT,
        status=ValidationStatus.ERROR,
        severity=ValidationSeverity.ERROR,
        message="No product variant assigned",
        suggested_action="Select a product variant for this line item",
    )


def check_line_item_has_sizes(line_item: Any, context: ValidationContext) -> CheckResult:
    units = total_units(line_item)

    if units > 0:
        return CheckResult(
            check_type=CheckType.LINE_ITEM_HAS_SIZES,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message=f"Total units: {units}",
            details={"total_units": units},
        )

    return CheckResult(
        check_type=CheckType.LINE_ITEM_HAS_SIZES,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No sizes/quantities specified",
        suggested_action="Add size quantities to this line item",
    )


LINE_ITEM_RULES = [
    check_line_item_has_variant,
    check_line_item_has_sizes,
]
