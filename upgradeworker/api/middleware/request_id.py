"""Request ID middleware — correlate every log line of one HTTP call."""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger("upgradeworker.api")

REQUEST_ID_HEADER = "X-Request-ID"


def request_id_from(request: Request) -> str:
    """Reuse the caller's ID when it is a UUID, otherwise mint one."""
    candidate = request.headers.get(REQUEST_ID_HEADER, "")
    try:
        return str(uuid.UUID(candidate))
    except ValueError:
        return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind request_id/method/path for the call and echo the ID back.

    Client and server errors are logged at warning level so rejected
    upgrades stand out from routine traffic.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request_id_from(request)
        tokens = structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("http.request_failed")
            raise
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            structlog.contextvars.reset_contextvars(**tokens)

        emit = log.warning if response.status_code >= 400 else log.info
        emit(
            "http.request_completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
