"""Validation rules implementations.

Each rule module contains discrete check functions taking
(entity, ValidationContext) and returning exactly one CheckResult.
"""

from .order_rules import ORDER_RULES
from .design_job_rules import DESIGN_JOB_RULES
from .line_item_rules import LINE_ITEM_RULES

__all__ = [
    "ORDER_RULES",
    "DESIGN_JOB_RULES",
    "LINE_ITEM_RULES",
]
