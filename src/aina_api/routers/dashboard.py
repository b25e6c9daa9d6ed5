"""
Public-information dashboard page.

Serves /dashboard/public-information: every widget's payload for one
location in a single response. A section whose data call fails carries
{"error": message} instead of failing the page.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import APIRouter, Depends

from aina_shared.geo import Point

from aina_api import widgets
from aina_api.dependencies import require_location
from aina_api.responses import DashboardError
from aina_api.services import (
    geographic_names_service,
    shoreline_service,
    soil_service,
    stream_gauge_service,
    tsunami_service,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

log = structlog.get_logger(__name__)


async def _section(
    name: str,
    fetch: Callable[[], Awaitable[dict[str, Any]] | dict[str, Any]],
    render: Callable[[dict[str, Any]], dict[str, Any]],
) -> dict[str, Any]:
    try:
        payload = fetch()
        if inspect.isawaitable(payload):
            payload = await payload
        return render(payload)
    except DashboardError as exc:
        log.warning("dashboard_section_failed", section=name, message=exc.message)
        return {"error": exc.message}
    except Exception as exc:
        log.exception("dashboard_section_crashed", section=name, error=str(exc))
        return {"error": f"Failed to load {name.replace('_', ' ')} data"}


@router.get("/public-information")
async def public_information(location: Point = Depends(require_location)):
    return {
        "location": {"lat": location.lat, "lon": location.lon},
        "soil": await _section(
            "soil",
            lambda: soil_service.get_soil_data(location),
            widgets.soil_card,
        ),
        "streamGauge": await _section(
            "stream_gauge",
            lambda: stream_gauge_service.get_stream_gauge(location),
            widgets.stream_gauge_chart,
        ),
        "shoreline": await _section(
            "shoreline",
            lambda: shoreline_service.get_shoreline_data(location),
            widgets.shoreline_marker_layer,
        ),
        "geographicNames": await _section(
            "geographic_names",
            lambda: geographic_names_service.get_geographic_names(location),
            widgets.geographic_names_table,
        ),
        "tsunami": await _section(
            "tsunami",
            lambda: tsunami_service.get_tsunami_zones(location),
            lambda payload: {
                "map": widgets.tsunami_zone_layer(payload),
                "summary": widgets.tsunami_zone_summary(payload),
            },
        ),
    }
