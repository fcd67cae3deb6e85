"""Request correlation IDs.

The current request ID lives in a ContextVar so log records emitted deep in
the validation service carry the ID of the HTTP request (or Celery task)
that triggered them.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "no-request-id"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def generate_request_id() -> str:
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Return the request ID bound to the current context, or a placeholder."""
    return request_id_var.get() or NO_REQUEST_ID


def set_request_id(request_id: Optional[str]) -> None:
    request_id_var.set(request_id)
