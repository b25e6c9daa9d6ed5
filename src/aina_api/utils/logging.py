"""
utils/logging.py — structlog configuration for the API process.

structlog renders JSON or console output according to settings.log_format.
Standard-library records (uvicorn, httpx) go through the same renderer via
structlog's ProcessorFormatter, so a single stream carries every line.
uvicorn's access log is muted: LoggingMiddleware already emits one
`request_completed` event per request.

Usage:
    from aina_api.utils.logging import configure_logging

    configure_logging()
    log = structlog.get_logger(__name__)
    log.info("gnis_features_filtered", total=412, nearby=37)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from aina_shared.config import settings

_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "hpack")


def _renderer(fmt: str) -> Any:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog and stdlib logging. Safe to call more than once;
    the root handler is replaced, not stacked.

    Args:
        log_level:  Override settings.log_level ("DEBUG", "INFO", …).
        log_format: Override settings.log_format ("json" | "console").
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    renderer = _renderer(log_format or settings.log_format)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=pre_chain,
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
