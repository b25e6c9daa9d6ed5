"""Stream gauge service (USGS NWIS gage height)."""

from __future__ import annotations

import re
from typing import Any

import httpx

from aina_shared.config import settings
from aina_shared.constants import USGS_NWIS_SOURCE
from aina_shared.geo import Point

from aina_api.responses import DashboardError, wrap_response
from aina_api.services.common import location_echo
from aina_api.sources.usgs import UnexpectedResponseError, UsgsStreamGaugeSource

# NWIS accepts ISO-8601 durations in days or hours, e.g. P7D, PT12H
_PERIOD_RE = re.compile(r"^P(\d{1,3}D|T\d{1,4}H)$")


async def get_stream_gauge(
    location: Point,
    *,
    period: str | None = None,
    source: UsgsStreamGaugeSource | None = None,
) -> dict[str, Any]:
    if period is not None and not _PERIOD_RE.match(period):
        raise DashboardError.bad_input(
            f"Invalid period '{period}'",
            details={"valid_formats": ["P<days>D", "PT<hours>H"]},
        )

    source = source or UsgsStreamGaugeSource()
    try:
        gauge = await source.fetch_readings(period)
    except UnexpectedResponseError as exc:
        raise DashboardError.upstream(str(exc)) from exc
    except httpx.HTTPError as exc:
        raise DashboardError.upstream("Failed to fetch stream gauge data", exc) from exc

    readings = gauge["readings"]
    latest = readings[-1] if readings else None
    return wrap_response(
        {
            "location": location_echo(location, settings.area),
            "site": {
                "id": source.site,
                "name": gauge["site_name"],
                "parameterCode": source.parameter_code,
                "variable": gauge["variable"],
            },
            "readings": readings,
        },
        source=USGS_NWIS_SOURCE,
        description=f"{settings.area_name} Stream - Gage Height",
        last_updated=latest["timestamp"] if latest else "",
        period=period or settings.usgs_period,
        totalReadings=len(readings),
        latestValue=latest["value"] if latest else None,
    )
