"""Order and order line item models

An order groups the products a customer is buying; each line item carries
a size grid (youth XS through 4XL) with one quantity column per size.

Lifecycle:
    new → waiting_sizes → invoiced → production → shipped → completed
    (cancelled reachable from any non-terminal state)
"""

from decimal import Decimal
from enum import Enum

from sqlalchemy import (
    Column, Integer, String, Text, Boolean, Date, DateTime, Numeric,
    Enum as SQLEnum, ForeignKey, Index
)
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class OrderStatus(str, Enum):
    """Order status enumeration."""
    NEW = "new"
    WAITING_SIZES = "waiting_sizes"
    INVOICED = "invoiced"
    PRODUCTION = "production"
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


# Size grid columns in display order (youth sizes first)
SIZE_COLUMNS = (
    "yxs", "ys", "ym", "yl",
    "xs", "s", "m", "l", "xl", "xxl", "xxxl", "xxxxl",
)


class Order(Base):
    """Order header with customer contact, shipping and fulfilment flags.

    validation_status / validation_last_run_at / has_unresolved_warnings are
    stamped by the validation service after every run.
    """

    __tablename__ = 'orders'
    __table_args__ = (
        Index("ix_orders_org_id", "org_id"),
        Index("ix_orders_status", "status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_code = Column(String, nullable=False, unique=True)
    org_id = Column(Integer, ForeignKey('organizations.id'), nullable=True)
    salesperson_id = Column(String, ForeignKey('users.id'), nullable=True)
    order_name = Column(String, nullable=False)

    status = Column(
        SQLEnum(
            *[s.value for s in OrderStatus],
            name='order_status'
        ),
        nullable=False,
        default=OrderStatus.NEW.value
    )
    priority = Column(
        SQLEnum(
            *[p.value for p in OrderPriority],
            name='order_priority'
        ),
        nullable=False,
        default=OrderPriority.NORMAL.value
    )

    # Fulfilment flags
    design_approved = Column(Boolean, nullable=False, default=False)
    sizes_validated = Column(Boolean, nullable=False, default=False)
    deposit_received = Column(Boolean, nullable=False, default=False)
    est_delivery = Column(Date, nullable=True)

    tracking_number = Column(Text, nullable=True)

    # Addresses
    shipping_address = Column(Text, nullable=True)
    bill_to_address = Column(Text, nullable=True)

    # Contact info
    contact_name = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)

    # Advisory validation state
    validation_status = Column(String, nullable=True)
    validation_last_run_at = Column(DateTime, nullable=True)
    has_unresolved_warnings = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    organization = relationship("Organization", back_populates="orders")
    line_items = relationship(
        "OrderLineItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineItem.id"
    )

    def __repr__(self):
        return f"<Order(id={self.id}, code='{self.order_code}', status='{self.status}')>"


class OrderLineItem(Base):
    """A product variant on an order with its per-size quantities."""

    __tablename__ = 'order_line_items'
    __table_args__ = (
        Index("ix_order_line_items_order_id", "order_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey('orders.id', ondelete="CASCADE"), nullable=False)
    variant_id = Column(Integer, nullable=True, comment="Catalog product variant")
    item_name = Column(String, nullable=True)
    color_notes = Column(Text, nullable=True)

    yxs = Column(Integer, nullable=True, default=0)
    ys = Column(Integer, nullable=True, default=0)
    ym = Column(Integer, nullable=True, default=0)
    yl = Column(Integer, nullable=True, default=0)
    xs = Column(Integer, nullable=True, default=0)
    s = Column(Integer, nullable=True, default=0)
    m = Column(Integer, nullable=True, default=0)
    l = Column(Integer, nullable=True, default=0)  # noqa: E741
    xl = Column(Integer, nullable=True, default=0)
    xxl = Column(Integer, nullable=True, default=0)
    xxxl = Column(Integer, nullable=True, default=0)
    xxxxl = Column(Integer, nullable=True, default=0)

    unit_price = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    order = relationship("Order", back_populates="line_items")

    @property
    def qty_total(self) -> int:
        """Sum of every size column (NULL counts as zero)."""
        return sum(getattr(self, size) or 0 for size in SIZE_COLUMNS)

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.unit_price or 0) * self.qty_total

    def __repr__(self):
        return f"<OrderLineItem(id={self.id}, order_id={self.order_id}, qty={self.qty_total})>"
