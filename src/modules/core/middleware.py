"""Request-scoped logging context.

``RequestContextMiddleware`` gives every request a request id, binds it
(with method and path) into structlog's contextvars so each log line of the
request carries them, writes one ``request_finished`` access line whose
level follows the response status, and echoes the id in ``X-Request-ID``.
"""

import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied ids end up in every log line: anything else is replaced.
_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._:-]{1,128}")

logger = structlog.get_logger(__name__)


def resolve_request_id(raw: str | None) -> str:
    """Return the client's request id when well-formed, else a new UUID4."""
    if raw and _REQUEST_ID_RE.fullmatch(raw):
        return raw
    return str(uuid.uuid4())


def _log_method_for(status_code: int):
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


class RequestContextMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.path,
        )

        started = time.perf_counter()
        try:
            response = self.get_response(request)
        except Exception:
            logger.exception(
                "request_failed",
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        _log_method_for(response.status_code)(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        response[REQUEST_ID_HEADER] = request_id
        return response
