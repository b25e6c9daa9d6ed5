"""Tsunami evacuation zone service."""

from __future__ import annotations

from typing import Any

import structlog

from aina_shared.config import settings
from aina_shared.constants import TSUNAMI_SOURCE
from aina_shared.geo import AreaOfInterest, Point
from aina_shared.models.tsunami import TsunamiZone

from aina_api.responses import wrap_response
from aina_api.services.common import load_source, location_echo
from aina_api.sources.geojson import TsunamiZoneSource

log = structlog.get_logger(__name__)


def zones_near(zones: list[TsunamiZone], area: AreaOfInterest) -> list[TsunamiZone]:
    """Zones whose first ring's first coordinate lies within the area radius."""
    nearby: list[TsunamiZone] = []
    for zone in zones:
        anchor = zone.anchor
        if anchor is not None and area.within_radius(*anchor):
            nearby.append(zone)
    return nearby


def get_tsunami_zones(
    location: Point,
    *,
    area: AreaOfInterest | None = None,
    source: TsunamiZoneSource | None = None,
) -> dict[str, Any]:
    area = area or settings.area
    source = source or TsunamiZoneSource(settings.tsunami_geojson_path)

    zones = load_source(source, "Failed to process tsunami evacuation zones")
    oahu_zones = sum(1 for z in zones if z.island == "OAHU")
    nearby = zones_near(zones, area)
    log.info(
        "tsunami_zones_filtered",
        total=len(zones),
        oahu=oahu_zones,
        nearby=len(nearby),
        radius_deg=area.radius_deg,
    )

    return wrap_response(
        {
            "location": location_echo(location, area),
            "zones": [z.model_dump() for z in nearby],
        },
        source=TSUNAMI_SOURCE,
        description="Tsunami evacuation zones for Hawaii",
        last_updated="2024",
        totalZones=len(nearby),
        oahuZones=oahu_zones,
    )
