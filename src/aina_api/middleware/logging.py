"""Per-request log context and the access log line."""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Binds request_id/method/path into structlog contextvars for the whole
    request, so service-level events carry them too, then logs one
    `request_completed` (or `request_failed`) event.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_failed", duration_ms=_elapsed_ms(start))
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        log = logger.warning if response.status_code >= 500 else logger.info
        log("request_completed", status=response.status_code, duration_ms=_elapsed_ms(start))
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
