"""Validation repository for database operations"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, delete, update, and_, desc
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from models.validation import ValidationResult, ValidationSummary
from models.order import Order
from models.design_job import DesignJob
from domain.validation.models import (
    CheckResult,
    EntityType,
    RunSummary,
    ValidationStatus,
)


class ValidationRepository:
    """Repository for validation_results / validation_summaries operations.

    Methods only flush; committing is left to the caller so a whole run
    (results, summary, entity stamp) lands in one transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def replace_results(
        self,
        entity_type: str,
        entity_id: str,
        results: list[CheckResult],
        expires_at: datetime,
        user_id: Optional[str] = None
    ) -> list[ValidationResult]:
        """Delete every stored result for the entity, then insert the new ones.

        Args:
            entity_type: Entity type value (order, design_job, line_item)
            entity_id: Entity id as a string
            results: Check outcomes from the engine
            expires_at: When the new rows stop being returned by reads
            user_id: User who triggered the run

        Returns:
            The inserted ValidationResult rows
        """
        self.db.execute(
            delete(ValidationResult).where(
                and_(
                    ValidationResult.entity_type == entity_type,
                    ValidationResult.entity_id == entity_id
                )
            )
        )

        rows = [
            ValidationResult(
                entity_type=entity_type,
                entity_id=entity_id,
                check_type=r.check_type.value,
                status=r.status.value,
                severity=r.severity.value,
                message=r.message,
                details=r.details,
                suggested_action=r.suggested_action,
                related_entity_type=r.related_entity_type,
                related_entity_id=r.related_entity_id,
                expires_at=expires_at,
                created_by_user_id=user_id,
            )
            for r in results
        ]

        if rows:
            self.db.add_all(rows)
            self.db.flush()

        return rows

    def upsert_summary(
        self,
        entity_type: str,
        entity_id: str,
        summary: RunSummary,
        overall: ValidationStatus,
        validated_at: datetime,
        valid_until: datetime
    ) -> None:
        """Insert or update the single summary row for an entity.

        Uses ON CONFLICT (entity_type, entity_id) DO UPDATE on PostgreSQL and
        SQLite so concurrent runs for the same entity never duplicate rows.
        """
        values = {
            "entity_type": entity_type,
            "entity_id": entity_id,
            "total_checks": summary.total_checks,
            "passed": summary.passed,
            "warnings": summary.warnings,
            "errors": summary.errors,
            "skipped": summary.skipped,
            "overall_status": overall.value,
            "validated_at": validated_at,
            "valid_until": valid_until,
            "created_at": validated_at,
            "updated_at": validated_at,
        }

        dialect = self.db.get_bind().dialect.name
        insert_fn = pg_insert if dialect == "postgresql" else sqlite_insert

        stmt = insert_fn(ValidationSummary).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["entity_type", "entity_id"],
            set_={
                "total_checks": stmt.excluded.total_checks,
                "passed": stmt.excluded.passed,
                "warnings": stmt.excluded.warnings,
                "errors": stmt.excluded.errors,
                "skipped": stmt.excluded.skipped,
                "overall_status": stmt.excluded.overall_status,
                "validated_at": stmt.excluded.validated_at,
                "valid_until": stmt.excluded.valid_until,
                "updated_at": stmt.excluded.updated_at,
            }
        )

        self.db.execute(stmt)
        self.db.flush()

    def mark_entity_status(
        self,
        entity_type: str,
        entity_id: str,
        summary: RunSummary,
        overall: ValidationStatus,
        validated_at: datetime
    ) -> None:
        """Stamp the validated entity with the latest overall status.

        Orders also record when validation last ran and whether warnings are
        outstanding. Line items carry no validation columns.
        """
        if entity_type == EntityType.ORDER.value:
            self.db.execute(
                update(Order)
                .where(Order.id == int(entity_id))
                .values(
                    validation_status=overall.value,
                    validation_last_run_at=validated_at,
                    has_unresolved_warnings=summary.warnings > 0,
                )
            )
        elif entity_type == EntityType.DESIGN_JOB.value:
            self.db.execute(
                update(DesignJob)
                .where(DesignJob.id == int(entity_id))
                .values(validation_status=overall.value)
            )

    def get_latest_summary(
        self,
        entity_type: str,
        entity_id: str
    ) -> Optional[ValidationSummary]:
        """Get the most recent summary for an entity, or None."""
        query = (
            select(ValidationSummary)
            .where(
                and_(
                    ValidationSummary.entity_type == entity_type,
                    ValidationSummary.entity_id == entity_id
                )
            )
            .order_by(desc(ValidationSummary.validated_at))
            .limit(1)
            .execution_options(populate_existing=True)
        )

        return self.db.execute(query).scalars().first()

    def get_active_results(
        self,
        entity_type: str,
        entity_id: str,
        now: datetime
    ) -> list[ValidationResult]:
        """Get unexpired results for an entity, ordered by check type."""
        query = (
            select(ValidationResult)
            .where(
                and_(
                    ValidationResult.entity_type == entity_type,
                    ValidationResult.entity_id == entity_id,
                    ValidationResult.expires_at > now
                )
            )
            .order_by(ValidationResult.check_type)
        )

        return list(self.db.execute(query).scalars().all())

    def acknowledge(
        self,
        result_id: str,
        user_id: str,
        note: Optional[str],
        acknowledged_at: datetime
    ) -> Optional[ValidationResult]:
        """Record that a user has seen a result.

        Acknowledging does not change the result's status or the summary;
        the advice stays visible until the next run replaces it.

        Returns:
            Updated ValidationResult, or None if not found
        """
        result = self.db.get(ValidationResult, result_id)

        if not result:
            return None

        result.acknowledged_at = acknowledged_at
        result.acknowledged_by_user_id = user_id
        result.acknowledgment_note = note
        self.db.flush()

        return result

    def clear_acknowledgment(self, result_id: str) -> Optional[ValidationResult]:
        """Remove acknowledgment metadata from a result.

        Returns:
            Updated ValidationResult, or None if not found
        """
        result = self.db.get(ValidationResult, result_id)

        if not result:
            return None

        result.acknowledged_at = None
        result.acknowledged_by_user_id = None
        result.acknowledgment_note = None
        self.db.flush()

        return result

    def delete_expired(self, now: datetime) -> int:
        """Delete results whose expiry is strictly before now.

        Returns:
            Number of rows deleted
        """
        result = self.db.execute(
            delete(ValidationResult).where(ValidationResult.expires_at < now)
        )
        self.db.flush()

        return result.rowcount
