"""Validation result and summary SQLAlchemy models

validation_results holds one row per check from the latest run of an entity;
rows carry an expiry so stale advice drops out of reads on its own.
validation_summaries holds exactly one row per (entity_type, entity_id).
"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, Text, DateTime, Index, UniqueConstraint

from .base import Base, PortableJSONB, utcnow


def _new_result_id() -> str:
    return str(uuid4())


class ValidationResult(Base):
    """Outcome of a single validation check for an entity.

    Table schema:
    - id: UUID string primary key
    - entity_type / entity_id: polymorphic reference (order, design_job, line_item)
    - check_type: check identifier (e.g. order_has_line_items)
    - status: pass/warning/error/skipped/unable
    - severity: info/warning/error
    - message, suggested_action: human-readable advice
    - details: JSON with check-specific metadata
    - related_entity_type / related_entity_id: optional pointer to another entity
    - expires_at: reads ignore rows at or past this instant
    - created_by_user_id: user who triggered the run
    - acknowledged_at / acknowledged_by_user_id / acknowledgment_note
    """
    __tablename__ = "validation_results"
    __table_args__ = (
        Index("ix_validation_results_entity", "entity_type", "entity_id"),
        Index("ix_validation_results_expires_at", "expires_at"),
    )

    id = Column(String, primary_key=True, default=_new_result_id)
    entity_type = Column(String, nullable=False)
    entity_id = Column(String, nullable=False)
    check_type = Column(String, nullable=False)
    status = Column(String, nullable=False)
    severity = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    details = Column(PortableJSONB, nullable=True)
    suggested_action = Column(Text, nullable=True)
    related_entity_type = Column(String, nullable=True)
    related_entity_id = Column(String, nullable=True)

    expires_at = Column(DateTime, nullable=False)
    created_by_user_id = Column(String, nullable=True)

    acknowledged_at = Column(DateTime, nullable=True)
    acknowledged_by_user_id = Column(String, nullable=True)
    acknowledgment_note = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)


class ValidationSummary(Base):
    """Aggregated counts and overall status of an entity's latest run."""
    __tablename__ = "validation_summaries"
    __table_args__ = (
        UniqueConstraint("entity_type", "entity_id", name="uq_validation_summaries_entity"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String, nullable=False)
    entity_id = Column(String, nullable=False)
    total_checks = Column(Integer, nullable=False, default=0)
    passed = Column(Integer, nullable=False, default=0)
    warnings = Column(Integer, nullable=False, default=0)
    errors = Column(Integer, nullable=False, default=0)
    skipped = Column(Integer, nullable=False, default=0)
    overall_status = Column(String, nullable=False)
    validated_at = Column(DateTime, nullable=False, default=utcnow)
    valid_until = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
