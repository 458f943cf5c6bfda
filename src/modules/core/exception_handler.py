"""DRF exception handler translating domain errors into HTTP responses.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  Every domain error
is rendered with the same body shape::

    {"detail": "...", "code": "...", "errors": [{"field": ..., "message": ...}]}

``errors`` is only present for payload validation failures.  Anything that
is not a domain error falls through to DRF's default handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import EntityConflict, EntityNotFound, InvalidRequest

logger = structlog.get_logger(__name__)

STATUS_BY_ERROR = (
    (EntityNotFound, status.HTTP_404_NOT_FOUND),
    (EntityConflict, status.HTTP_409_CONFLICT),
    (InvalidRequest, status.HTTP_400_BAD_REQUEST),
)


def _error_body(exc: Exception) -> Dict[str, Any]:
    body: Dict[str, Any] = {"detail": str(exc), "code": exc.code}
    errors = getattr(exc, "errors", None)
    if errors:
        body["errors"] = errors
    return body


def domain_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            view = context.get("view")
            logger.info(
                "request.domain_error",
                error=type(exc).__name__,
                status_code=status_code,
                view=type(view).__name__ if view else None,
            )
            return Response(_error_body(exc), status=status_code)
    return drf_exception_handler(exc, context)
