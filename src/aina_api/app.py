"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aina_shared.config import settings

from aina_api import __version__
from aina_api.middleware.logging import LoggingMiddleware
from aina_api.responses import (
    DashboardError,
    dashboard_error_handler,
    unhandled_error_handler,
)
from aina_api.routers.dashboard import router as dashboard_router
from aina_api.routers.health import router as health_router
from aina_api.routers.v1 import v1_router
from aina_api.startup import check_static_sources
from aina_api.utils.cache import TTLCache
from aina_api.utils.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.validate_sources_on_startup:
        report = check_static_sources()
        logger.info("static_sources_checked", **report)
    yield


def create_app(metrics_cache: TTLCache | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Aina Dashboard API",
        description="Waimanalo public environmental and emergency data",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    if metrics_cache is None:
        metrics_cache = TTLCache(ttl=settings.metrics_cache_ttl)
    app.state.metrics_cache = metrics_cache

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(v1_router)
    app.include_router(dashboard_router)

    logger.info("app_created", cors_origins=settings.cors_origins_list, area=settings.area_name)
    return app


app = create_app()
