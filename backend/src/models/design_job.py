"""Design job model

A design job is the artwork request behind an order: a brief from sales,
reference files from the customer, and renditions uploaded by the designer.

State Flow:
    pending → assigned → in_progress → review → approved|rejected → completed
"""

from enum import Enum

from sqlalchemy import (
    Column, Integer, String, Text, Boolean, Date, DateTime,
    Enum as SQLEnum, ForeignKey, Index
)
from sqlalchemy.orm import relationship

from .base import Base, PortableTextArray, utcnow


class DesignJobStatus(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class DesignJob(Base):
    """Design job linked to an organization and optionally an order."""

    __tablename__ = "design_jobs"
    __table_args__ = (
        Index("ix_design_jobs_org_id", "org_id"),
        Index("ix_design_jobs_status", "status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_code = Column(String, nullable=False, unique=True)
    org_id = Column(Integer, ForeignKey("organizations.id"), nullable=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=True)
    salesperson_id = Column(String, ForeignKey("users.id"), nullable=True)

    brief = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    urgency = Column(String, nullable=False, default="normal")
    status = Column(
        SQLEnum(
            *[s.value for s in DesignJobStatus],
            name="design_job_status"
        ),
        nullable=False,
        default=DesignJobStatus.PENDING.value
    )
    assigned_designer_id = Column(String, ForeignKey("users.id"), nullable=True)
    deadline = Column(Date, nullable=True)
    priority = Column(String, nullable=False, default="normal")

    # File references
    reference_files = Column(PortableTextArray, nullable=True)
    logo_urls = Column(PortableTextArray, nullable=True)
    rendition_urls = Column(PortableTextArray, nullable=True)
    rendition_count = Column(Integer, nullable=False, default=0)

    validation_status = Column(String, nullable=True)

    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    organization = relationship("Organization", back_populates="design_jobs")
    order = relationship("Order")

    def __repr__(self):
        return f"<DesignJob(id={self.id}, code='{self.job_code}', status='{self.status}')>"
