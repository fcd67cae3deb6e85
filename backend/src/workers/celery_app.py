"""Celery application and beat schedule.

Start a worker with beat embedded:
    celery -A workers.celery_app worker --beat --loglevel=INFO
"""

from celery import Celery

from config import get_settings

settings = get_settings()

celery_app = Celery(
    "richhabits",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["validation.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="UTC",
    enable_utc=True,
)

celery_app.conf.beat_schedule = {
    "validation-cleanup-expired": {
        "task": "validation.cleanup_expired",
        "schedule": settings.VALIDATION_CLEANUP_INTERVAL_MINUTES * 60.0,
        "options": {
            "expires": 600,  # Skip if not picked up within 10 minutes
        },
    },
}
