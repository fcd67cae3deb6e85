"""Celery tasks for validation housekeeping.

Tasks:
- validation.cleanup_expired: periodic purge of expired validation results
- validation.validate_order: run order validation outside a request
"""

import logging
from typing import Any, Dict, Optional

from celery import shared_task

from database import SessionLocal
from .service import ValidationService

logger = logging.getLogger(__name__)


@shared_task(name="validation.cleanup_expired", bind=True)
def cleanup_expired_results_task(self) -> Dict[str, Any]:
    """Delete validation results whose expiry has passed.

    Reads already hide expired rows, so this only keeps the table small.
    The task is idempotent; a second run in a row deletes nothing.

    Returns:
        Dict with status and the number of rows deleted
    """
    logger.info("Validation cleanup task started")

    db = SessionLocal()
    try:
        deleted = ValidationService(db).cleanup_expired_results()
        return {"status": "completed", "deleted": deleted}

    except Exception as e:
        logger.error(
            "Validation cleanup task failed",
            exc_info=True,
            extra={"error": str(e)}
        )
        return {"status": "failed", "error": str(e), "deleted": 0}

    finally:
        db.close()


@shared_task(name="validation.validate_order", bind=True)
def validate_order_task(self, order_id: int, user_id: Optional[str] = None) -> Dict[str, Any]:
    """Run order validation in a worker and return the serialized run."""
    db = SessionLocal()
    try:
        result = ValidationService(db).validate_order(order_id, user_id)
        return result.to_dict()
    finally:
        db.close()
