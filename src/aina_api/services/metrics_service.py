"""Sensor metrics service: per-mala time series for the caller's aina."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import structlog

from aina_shared.constants import METRICS_CACHE_KEY
from aina_shared.db import get_supabase_client
from aina_shared.models.metrics import UNKNOWN, LocationMetrics, MetricPoint, MetricRow

from aina_api.middleware.auth import AuthUser
from aina_api.responses import DashboardError
from aina_api.utils.cache import TTLCache

log = structlog.get_logger(__name__)


def resolve_aina_id(user_id: str) -> str | None:
    """Look up the aina (site) owned by a user."""
    supabase = get_supabase_client(service_role=True)
    result = (
        supabase.table("aina")
        .select("id")
        .eq("user_id", user_id)
        .limit(1)
        .execute()
    )
    if result.data:
        return str(result.data[0]["id"])
    return None


def fetch_metric_rows(aina_id: str) -> list[MetricRow]:
    """
    Every metric reading for the aina, oldest first.

    `aina_metrics` joins metric → sensor_mala → mala → aina and
    metric_type, ordered by timestamp ascending (see supabase/migrations).
    """
    supabase = get_supabase_client()
    result = supabase.rpc("aina_metrics", {"p_aina_id": aina_id}).execute()
    return [MetricRow.from_db_row(row) for row in result.data or []]


def fold_metric_rows(rows: list[MetricRow]) -> list[dict[str, Any]]:
    """
    Group rows by mala name then metric type.

    Row order is preserved inside each series, so ascending input gives
    ascending series. Missing names fold under "unknown"; a missing value
    reads as 0.
    """
    grouped: dict[str, LocationMetrics] = {}
    for row in rows:
        mala = row.mala_name or UNKNOWN
        metric_type = row.type_name or UNKNOWN
        location = grouped.setdefault(mala, LocationMetrics(name=mala))
        timestamp = row.timestamp or datetime.now(timezone.utc)
        location.data.setdefault(metric_type, []).append(
            MetricPoint(timestamp=timestamp.isoformat(), value=row.value or 0)
        )
    return [location.model_dump() for location in grouped.values()]


def get_location_metrics(cache: TTLCache, user: AuthUser | None) -> list[dict[str, Any]]:
    """
    Cached per-location metric series.

    A fresh cache entry is returned as-is. Otherwise the user and their
    aina are resolved; if either is missing the result is empty and
    nothing is cached.
    """
    cached = cache.get(METRICS_CACHE_KEY)
    if cached is not None:
        log.debug("metrics_cache_hit", key=METRICS_CACHE_KEY)
        return cached

    log.info("metrics_cache_miss", key=METRICS_CACHE_KEY)
    if user is None:
        return []

    try:
        aina_id = resolve_aina_id(user.user_id)
        if aina_id is None:
            log.info("metrics_no_aina", user_id=user.user_id)
            return []
        rows = fetch_metric_rows(aina_id)
    except Exception as exc:
        raise DashboardError.upstream("Failed to fetch sensor metrics", exc) from exc

    locations = fold_metric_rows(rows)
    cache.set(METRICS_CACHE_KEY, locations)
    log.info("metrics_computed", aina_id=aina_id, rows=len(rows), locations=len(locations))
    return locations
