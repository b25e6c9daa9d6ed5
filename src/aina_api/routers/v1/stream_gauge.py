"""Stream gauge endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from aina_shared.geo import Point

from aina_api.dependencies import require_location
from aina_api.services import stream_gauge_service

router = APIRouter(prefix="/stream-gauge", tags=["stream-gauge"])


@router.get("")
async def get_stream_gauge(
    location: Point = Depends(require_location),
    period: str | None = Query(None, description="ISO-8601 duration, e.g. P7D"),
):
    """Recent Waimanalo Stream gage height readings from USGS NWIS."""
    return await stream_gauge_service.get_stream_gauge(location, period=period)
