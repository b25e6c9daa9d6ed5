"""Response envelopes and the error-kind → status mapping."""

from __future__ import annotations

from enum import Enum
from typing import Any

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class ErrorKind(str, Enum):
    BAD_INPUT = "bad_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.BAD_INPUT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM_FAILURE: 500,
}


class DashboardError(Exception):
    """A request failure with a closed kind; rendered by `dashboard_error_handler`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        error: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.error = error
        self.details = details or {}

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @classmethod
    def bad_input(cls, message: str, **kwargs: Any) -> "DashboardError":
        return cls(ErrorKind.BAD_INPUT, message, **kwargs)

    @classmethod
    def unauthorized(cls, message: str, **kwargs: Any) -> "DashboardError":
        return cls(ErrorKind.UNAUTHORIZED, message, **kwargs)

    @classmethod
    def not_found(cls, message: str, **kwargs: Any) -> "DashboardError":
        return cls(ErrorKind.NOT_FOUND, message, **kwargs)

    @classmethod
    def upstream(
        cls,
        message: str,
        exc: BaseException | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> "DashboardError":
        return cls(
            ErrorKind.UPSTREAM_FAILURE,
            message,
            error=str(exc) if exc is not None else None,
            details=details,
        )


def error_response(
    message: str,
    *,
    error: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the `{message, error?, ...details}` error body."""
    body: dict[str, Any] = {"message": message}
    if error:
        body["error"] = error
    if details:
        body.update(details)
    return body


def wrap_response(
    payload: dict[str, Any],
    *,
    source: str,
    description: str,
    last_updated: str,
    **counts: Any,
) -> dict[str, Any]:
    """Attach the `metadata` provenance block to a category payload."""
    return {
        **payload,
        "metadata": {
            "source": source,
            "description": description,
            "lastUpdated": last_updated,
            **counts,
        },
    }


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    log = logger.bind(path=request.url.path, kind=exc.kind.value, status=exc.status_code)
    if exc.status_code >= 500:
        log.error("request_error", message=exc.message, error=exc.error)
    else:
        log.warning("request_error", message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, error=exc.error, details=exc.details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything that escaped the services is reported as an upstream failure."""
    logger.error("request_unhandled_error", path=request.url.path, error=str(exc), exc_info=exc)
    error = DashboardError.upstream("Internal server error", exc)
    return JSONResponse(
        status_code=error.status_code,
        content=error_response(error.message, error=error.error),
    )
