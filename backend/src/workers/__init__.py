"""Background workers module for async task processing.

Exposes the Celery application; task modules are registered through its
`include` list.
"""

from .celery_app import celery_app

__all__ = [
    "celery_app",
]
