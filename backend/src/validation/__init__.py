"""Advisory validation feature module.

Wires the pure validation domain to the database (ValidationService) and
to Celery (periodic cleanup of expired results).
"""

from .service import ValidationService

__all__ = [
    "ValidationService",
]
