"""Shared FastAPI dependencies."""

from __future__ import annotations

import math

from fastapi import Query, Request

from aina_shared.geo import Point

from aina_api.middleware.auth import AuthUser, get_current_user
from aina_api.responses import DashboardError
from aina_api.utils.cache import TTLCache

__all__ = [
    "AuthUser",
    "get_current_user",
    "get_metrics_cache",
    "require_location",
]


def require_location(
    lat: str | None = Query(None, description="Latitude in decimal degrees"),
    lon: str | None = Query(None, description="Longitude in decimal degrees"),
) -> Point:
    """Parse the required lat/lon query pair. 400 before any I/O if absent."""
    if not lat or not lon:
        raise DashboardError.bad_input("Missing lat/lon parameters")
    try:
        point = Point(lat=float(lat), lon=float(lon))
    except ValueError:
        raise DashboardError.bad_input(
            "Invalid lat/lon parameters", details={"lat": lat, "lon": lon}
        ) from None
    if not (math.isfinite(point.lat) and math.isfinite(point.lon)):
        raise DashboardError.bad_input(
            "Invalid lat/lon parameters", details={"lat": lat, "lon": lon}
        )
    return point


def get_metrics_cache(request: Request) -> TTLCache:
    """The app-scoped metrics cache created by create_app()."""
    return request.app.state.metrics_cache
