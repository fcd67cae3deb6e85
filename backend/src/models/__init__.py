"""SQLAlchemy Models for the RichHabits ops backend"""

from .base import Base
from .organization import Organization
from .user import User
from .order import Order, OrderLineItem, OrderStatus, OrderPriority, SIZE_COLUMNS
from .design_job import DesignJob, DesignJobStatus
from .validation import ValidationResult, ValidationSummary

__all__ = [
    "Base",
    "Organization",
    "User",
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "OrderPriority",
    "SIZE_COLUMNS",
    "DesignJob",
    "DesignJobStatus",
    "ValidationResult",
    "ValidationSummary",
]
