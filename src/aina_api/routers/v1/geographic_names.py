"""Geographic place-name endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aina_shared.geo import Point

from aina_api.dependencies import require_location
from aina_api.services import geographic_names_service

router = APIRouter(prefix="/geographic-names", tags=["geographic-names"])


@router.get("")
async def get_geographic_names(location: Point = Depends(require_location)):
    """GNIS features inside the area bounding box, grouped by feature class."""
    return geographic_names_service.get_geographic_names(location)
