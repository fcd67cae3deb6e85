"""Validation service - loads entities, runs the engine, persists outcomes.

Every run happens inside the caller's session and is committed once:
results are replaced (delete then insert), the summary is upserted and
the validated entity is stamped with its overall status.
"""

import logging
import time
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from config import get_settings
from models.base import utcnow
from models.order import Order, OrderLineItem
from models.design_job import DesignJob
from models.validation import ValidationResult, ValidationSummary
from domain.validation import (
    EntityType,
    ValidationContext,
    ValidationEngine,
    ValidationRunResult,
    not_found_result,
    overall_status,
    summarize,
)
from infrastructure.repositories.validation_repository import ValidationRepository
from observability.metrics import (
    validation_runs_total,
    validation_checks_total,
    validation_run_duration_seconds,
    validation_results_expired_total,
)

logger = logging.getLogger(__name__)


class ValidationService:
    """Service for advisory validation operations."""

    def __init__(
        self,
        db: Session,
        engine: Optional[ValidationEngine] = None,
        ttl_minutes: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.db = db
        self.engine = engine or ValidationEngine()
        self.repo = ValidationRepository(db)
        if ttl_minutes is None:
            ttl_minutes = get_settings().VALIDATION_RESULT_TTL_MINUTES
        self.ttl = timedelta(minutes=ttl_minutes)
        self.clock = clock or utcnow

    # ------------------------------------------------------------------
    # Running validation
    # ------------------------------------------------------------------

    def validate_order(self, order_id: int, user_id: Optional[str] = None) -> ValidationRunResult:
        """Run all order checks.

        Args:
            order_id: Order primary key
            user_id: User who triggered the run (stored on each result)

        Returns:
            ValidationRunResult; overall_status UNABLE if the order is missing
        """
        order = self.db.execute(
            select(Order)
            .where(Order.id == order_id)
            .options(selectinload(Order.line_items))
        ).scalars().first()

        if not order:
            logger.info(f"Order {order_id} not found; skipping validation")
            return not_found_result(EntityType.ORDER.value, str(order_id), "Order not found")

        context = ValidationContext(now=self.clock(), line_items=list(order.line_items))

        return self._run(EntityType.ORDER, order_id, order, context, user_id)

    def validate_design_job(self, job_id: int, user_id: Optional[str] = None) -> ValidationRunResult:
        """Run all design job checks."""
        job = self.db.get(DesignJob, job_id)

        if not job:
            logger.info(f"Design job {job_id} not found; skipping validation")
            return not_found_result(
                EntityType.DESIGN_JOB.value, str(job_id), "Design job not found"
            )

        context = ValidationContext(now=self.clock())

        return self._run(EntityType.DESIGN_JOB, job_id, job, context, user_id)

    def validate_line_item(self, line_item_id: int, user_id: Optional[str] = None) -> ValidationRunResult:
        """Run all checks for a single line item."""
        line_item = self.db.get(OrderLineItem, line_item_id)

        if not line_item:
            logger.info(f"Line item {line_item_id} not found; skipping validation")
            return not_found_result(
                EntityType.LINE_ITEM.value, str(line_item_id), "Line item not found"
            )

        context = ValidationContext(now=self.clock(), line_items=[line_item])

        return self._run(EntityType.LINE_ITEM, line_item_id, line_item, context, user_id)

    def validate_orders(
        self,
        order_ids: list[int],
        user_id: Optional[str] = None
    ) -> list[ValidationRunResult]:
        """Validate several orders; results come back in input order."""
        return [self.validate_order(order_id, user_id) for order_id in order_ids]

    def _run(
        self,
        entity_type: EntityType,
        entity_id: int,
        entity,
        context: ValidationContext,
        user_id: Optional[str]
    ) -> ValidationRunResult:
        started = time.perf_counter()
        entity_key = str(entity_id)

        results = self.engine.validate(entity_type, entity, context)
        summary = summarize(results)
        overall = overall_status(summary)

        expires_at = context.now + self.ttl

        try:
            self.repo.replace_results(
                entity_type.value, entity_key, results, expires_at, user_id
            )
            self.repo.upsert_summary(
                entity_type.value,
                entity_key,
                summary,
                overall,
                validated_at=context.now,
                valid_until=expires_at,
            )
            self.repo.mark_entity_status(
                entity_type.value, entity_key, summary, overall, context.now
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error(
                f"Failed to persist validation for {entity_type.value} {entity_key}",
                exc_info=True
            )
            raise

        validation_runs_total.labels(
            entity_type=entity_type.value,
            overall_status=overall.value
        ).inc()
        for result in results:
            validation_checks_total.labels(
                check_type=result.check_type.value,
                status=result.status.value
            ).inc()
        validation_run_duration_seconds.labels(entity_type=entity_type.value).observe(
            time.perf_counter() - started
        )

        logger.info(
            f"Validated {entity_type.value} {entity_key}: {overall.value} "
            f"({summary.passed} passed, {summary.warnings} warnings, "
            f"{summary.errors} errors, {summary.skipped} skipped)",
            extra={"user_id": user_id} if user_id else None
        )

        return ValidationRunResult(
            entity_type=entity_type.value,
            entity_id=entity_key,
            overall_status=overall,
            results=results,
            summary=summary,
        )

    # ------------------------------------------------------------------
    # Reading and acknowledging
    # ------------------------------------------------------------------

    def get_summary(self, entity_type: str, entity_id: str) -> Optional[ValidationSummary]:
        return self.repo.get_latest_summary(entity_type, entity_id)

    def get_results(self, entity_type: str, entity_id: str) -> list[ValidationResult]:
        """Unexpired results of the entity's latest run, ordered by check type."""
        return self.repo.get_active_results(entity_type, entity_id, self.clock())

    def acknowledge_warning(
        self,
        result_id: str,
        user_id: str,
        note: Optional[str] = None
    ) -> Optional[ValidationResult]:
        """Mark a result as seen by a user. Returns None if it does not exist."""
        result = self.repo.acknowledge(result_id, user_id, note, self.clock())
        if result is None:
            return None

        self.db.commit()
        logger.info(f"Validation result {result_id} acknowledged", extra={"user_id": user_id})
        return result

    def clear_acknowledgment(self, result_id: str) -> Optional[ValidationResult]:
        result = self.repo.clear_acknowledgment(result_id)
        if result is None:
            return None

        self.db.commit()
        return result

    def cleanup_expired_results(self) -> int:
        """Delete expired results and return how many were removed."""
        deleted = self.repo.delete_expired(self.clock())
        self.db.commit()

        if deleted:
            validation_results_expired_total.inc(deleted)
        logger.info(f"Deleted {deleted} expired validation results")

        return deleted
