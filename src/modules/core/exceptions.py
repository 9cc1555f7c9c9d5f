"""Project-wide DRF exception handler.

- ``APIException`` subclasses keep DRF's status code and are rendered as
  ``{"error": <detail>}``.
- ``DatabaseError`` (connection loss, constraint violations, ...) becomes a
  generic ``500 {"error": ...}``; the details only go to the log.
- Anything else is left to Django (re-raised by DRF).
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"error": str(detail) if detail is not None else response.data}
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "unhandled_database_error",
            view=type(view).__name__ if view is not None else None,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        set_rollback()
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return None
