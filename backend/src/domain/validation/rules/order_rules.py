"""Order-level validation rules"""

from typing import Any

from ..models import (
    CheckResult,
    CheckType,
    ValidationStatus,
    ValidationSeverity,
    ValidationContext
)
from .common import is_blank, total_units, to_datetime, format_date

# Statuses at which an order is committed to production
COMMITTED_STATUSES = ("invoiced", "production", "shipped")
CLOSED_STATUSES = ("completed", "shipped", "cancelled")


def check_order_has_customer_info(order: Any, context: ValidationContext) -> CheckResult:
    """Name and email are required; phone is reported but not required."""
    has_name = bool(order.contact_name)
    has_email = bool(order.contact_email)
    has_phone = bool(order.contact_phone)

    if has_name and has_email:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_CUSTOMER_INFO,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Customer contact information is complete",
        )

    missing = []
    if not has_name:
        missing.append("name")
    if not has_email:
        missing.append("email")
    if not has_phone:
        missing.append("phone")

    return CheckResult(
        check_type=CheckType.ORDER_HAS_CUSTOMER_INFO,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message=f"Missing customer contact fields: {', '.join(missing)}",
        details={"missing_fields": missing},
        suggested_action="Add customer contact information before sending to production",
    )


def check_order_has_shipping_address(order: Any, context: ValidationContext) -> CheckResult:
    if not is_blank(order.shipping_address):
        return CheckResult(
            check_type=CheckType.ORDER_HAS_SHIPPING_ADDRESS,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Shipping address is present",
        )

    return CheckResult(
        check_type=CheckType.ORDER_HAS_SHIPPING_ADDRESS,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No shipping address provided",
        suggested_action="Add shipping address before invoicing",
    )


def check_order_has_line_items(order: Any, context: ValidationContext) -> CheckResult:
    count = len(context.line_items)
    if count > 0:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_LINE_ITEMS,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message=f"Order has {count} line item(s)",
        )

    # The only order check that reports an error
    return CheckResult(
        check_type=CheckType.ORDER_HAS_LINE_ITEMS,
        status=ValidationStatus.ERROR,
        severity=ValidationSeverity.ERROR,
        message="Order has no line items",
        suggested_action="Add at least one product to the order",
    )


def check_order_line_items_have_sizes(order: Any, context: ValidationContext) -> CheckResult:
    """Every line item needs at least one unit in its size grid.

    An order without line items passes here; that case is reported by
    check_order_has_line_items.
    """
    without_sizes = [item for item in context.line_items if total_units(item) == 0]

    if not without_sizes:
        return CheckResult(
            check_type=CheckType.ORDER_LINE_ITEMS_HAVE_SIZES,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="All line items have sizes specified",
        )

    return CheckResult(
        check_type=CheckType.ORDER_LINE_ITEMS_HAVE_SIZES,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message=f"{len(without_sizes)} line item(s) have no sizes specified",
        details={"line_item_ids": [item.id for item in without_sizes]},
        suggested_action="Ensure all line items have sizes before sending to production",
    )


def check_order_has_design_approval(order: Any, context: ValidationContext) -> CheckResult:
    if order.status not in COMMITTED_STATUSES:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_DESIGN_APPROVAL,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="Design approval check not required at current status",
        )

    if order.design_approved:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_DESIGN_APPROVAL,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Design has been approved",
        )

    return CheckResult(
        check_type=CheckType.ORDER_HAS_DESIGN_APPROVAL,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="Design has not been marked as approved",
        suggested_action="Confirm design approval before proceeding",
    )


def check_order_has_deposit(order: Any, context: ValidationContext) -> CheckResult:
    if order.status not in COMMITTED_STATUSES:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_DEPOSIT,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="Deposit check not required at current status",
        )

    if order.deposit_received:
        return CheckResult(
            check_type=CheckType.ORDER_HAS_DEPOSIT,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Deposit has been received",
        )

    return CheckResult(
        check_type=CheckType.ORDER_HAS_DEPOSIT,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No deposit received yet",
        suggested_action="Verify deposit before starting production",
    )


def check_order_est_delivery_is_future(order: Any, context: ValidationContext) -> CheckResult:
    if not order.est_delivery:
        return CheckResult(
            check_type=CheckType.ORDER_EST_DELIVERY_IS_FUTURE,
            status=ValidationStatus.WARNING,
            severity=ValidationSeverity.INFO,
            message="No estimated delivery date set",
            suggested_action="Set an estimated delivery date",
        )

    est_delivery = to_datetime(order.est_delivery)

    if est_delivery > context.now:
        return CheckResult(
            check_type=CheckType.ORDER_EST_DELIVERY_IS_FUTURE,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message=f"Estimated delivery: {format_date(est_delivery)}",
        )

    if order.status in CLOSED_STATUSES:
        return CheckResult(
            check_type=CheckType.ORDER_EST_DELIVERY_IS_FUTURE,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="Order is already completed/shipped",
        )

    return CheckResult(
        check_type=CheckType.ORDER_EST_DELIVERY_IS_FUTURE,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message=f"Estimated delivery date is in the past: {format_date(est_delivery)}",
        details={"est_delivery": format_date(est_delivery)},
        suggested_action="Update estimated delivery date or check order status",
    )


ORDER_RULES = [
    check_order_has_customer_info,
    check_order_has_shipping_address,
    check_order_has_line_items,
    check_order_line_items_have_sizes,
    check_order_has_design_approval,
    check_order_has_deposit,
    check_order_est_delivery_is_future,
]
