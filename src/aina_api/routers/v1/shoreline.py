"""Shoreline public access endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aina_shared.geo import Point

from aina_api.dependencies import require_location
from aina_api.services import shoreline_service

router = APIRouter(prefix="/shoreline-data", tags=["shoreline"])


@router.get("")
async def get_shoreline_data(location: Point = Depends(require_location)):
    """Shoreline access points with facilities and approximate coast length (km)."""
    return shoreline_service.get_shoreline_data(location)
