"""Sensor metric endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aina_api.dependencies import AuthUser, get_current_user, get_metrics_cache
from aina_api.services import metrics_service
from aina_api.utils.cache import TTLCache

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("")
async def get_metrics(
    cache: TTLCache = Depends(get_metrics_cache),
    user: AuthUser | None = Depends(get_current_user),
):
    """Per-mala metric series for the caller's aina. Cached for the configured TTL."""
    return {"locations": metrics_service.get_location_metrics(cache, user)}
