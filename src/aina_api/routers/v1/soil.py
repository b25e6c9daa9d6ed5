"""Soil health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aina_shared.geo import Point

from aina_api.dependencies import require_location
from aina_api.services import soil_service

router = APIRouter(prefix="/soil-data", tags=["soil"])


@router.get("")
async def get_soil_data(location: Point = Depends(require_location)):
    """
    Soil series, taxonomy and suitability for the area.

    Returns 404 with `availableSeries` when the component table holds none
    of the recognised series.
    """
    return soil_service.get_soil_data(location)
