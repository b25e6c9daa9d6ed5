"""Geographic place-name service (USGS GNIS)."""

from __future__ import annotations

from typing import Any

import structlog

from aina_shared.categorize import categorize_features
from aina_shared.config import settings
from aina_shared.constants import GNIS_SOURCE
from aina_shared.geo import AreaOfInterest, Point

from aina_api.responses import wrap_response
from aina_api.services.common import load_source, location_echo
from aina_api.sources.geojson import GnisSource

log = structlog.get_logger(__name__)


def get_geographic_names(
    location: Point,
    *,
    area: AreaOfInterest | None = None,
    source: GnisSource | None = None,
) -> dict[str, Any]:
    """Named features inside the area's bounding box, bucketed by feature class."""
    area = area or settings.area
    source = source or GnisSource(settings.gnis_geojson_path)

    features = load_source(source, "Failed to fetch geographic names")
    nearby = [f for f in features if area.in_bounds(f.lat, f.lon)]
    log.info("gnis_features_filtered", total=len(features), nearby=len(nearby), area=area.name)

    buckets = categorize_features(nearby)
    return wrap_response(
        {
            "location": location_echo(location, area),
            "features": {
                name: [f.model_dump() for f in members] for name, members in buckets.items()
            },
        },
        source=GNIS_SOURCE,
        description=f"Geographic features and place names around {area.name}, Oahu",
        last_updated="2025",
        totalFeatures=len(nearby),
    )
