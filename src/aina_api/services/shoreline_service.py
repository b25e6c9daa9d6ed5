"""Shoreline public access service."""

from __future__ import annotations

from typing import Any

from aina_shared.config import settings
from aina_shared.constants import SHORELINE_SOURCE
from aina_shared.geo import AreaOfInterest, Point, path_length_km

from aina_api.responses import wrap_response
from aina_api.services.common import load_source, location_echo
from aina_api.sources.shoreline import ShorelineAccessSource


def get_shoreline_data(
    location: Point,
    *,
    area: AreaOfInterest | None = None,
    source: ShorelineAccessSource | None = None,
) -> dict[str, Any]:
    area = area or settings.area
    points = load_source(source or ShorelineAccessSource(), "Failed to fetch shoreline data")

    # Approximate coast length: consecutive access points in shoreline order
    length_km = path_length_km([(p.lat, p.lon) for p in points])

    return wrap_response(
        {
            "location": location_echo(location, area),
            "shorelinePoints": [p.model_dump() for p in points],
        },
        source=SHORELINE_SOURCE,
        description=f"{area.name} Shoreline Public Access Points",
        last_updated="2025",
        dataUrl="Local GeoJSON Data",
        totalPoints=len(points),
        shorelineLength=length_km,
    )
