"""Tsunami evacuation zone endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aina_shared.geo import Point

from aina_api.dependencies import require_location
from aina_api.services import tsunami_service

router = APIRouter(prefix="/tsunami-zones", tags=["tsunami"])


@router.get("")
async def get_tsunami_zones(location: Point = Depends(require_location)):
    """Evacuation zones anchored within the area radius, with original zone codes."""
    return tsunami_service.get_tsunami_zones(location)
