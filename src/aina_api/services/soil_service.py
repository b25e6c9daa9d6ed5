"""Soil health service (SSURGO component table)."""

from __future__ import annotations

from typing import Any

import structlog

from aina_shared.config import settings
from aina_shared.constants import SOIL_SOURCE, WAIMANALO_SOIL_SERIES
from aina_shared.geo import Point
from aina_shared.models.soil import SoilRecord

from aina_api.responses import DashboardError, wrap_response
from aina_api.services.common import load_source
from aina_api.sources.tabular import SoilComponentSource

log = structlog.get_logger(__name__)


def available_series(records: list[SoilRecord]) -> list[str]:
    """Distinct non-empty series names in file order."""
    return list(dict.fromkeys(r.soil_series for r in records if r.soil_series))


def get_soil_data(
    location: Point,
    *,
    allow_list: tuple[str, ...] = WAIMANALO_SOIL_SERIES,
    source: SoilComponentSource | None = None,
) -> dict[str, Any]:
    """
    Soil profile for the area: the first component row whose series is on
    the allow-list.

    Raises:
        DashboardError (NOT_FOUND): no allow-listed series in the file; the
            error body lists every series that was present.
    """
    source = source or SoilComponentSource(settings.soil_component_path)
    records = load_source(source, "Failed to fetch soil health data")

    matches = [r for r in records if r.soil_series in allow_list]
    if not matches:
        present = available_series(records)
        log.warning("soil_series_not_found", allow_list=list(allow_list), present=present)
        raise DashboardError.not_found(
            f"Soil health data not available for {settings.area_name} area",
            details={"availableSeries": present},
        )

    soil = matches[0]
    log.info("soil_series_selected", series=soil.soil_series, candidates=len(matches))
    return wrap_response(
        {
            "location": {"lat": location.lat, "lon": location.lon},
            "soilSeries": soil.soil_series,
            "drainageClass": soil.drainage_class,
            "hydrologicGroup": soil.hydrologic_group,
            "erosionFactor": soil.erosion_factor,
            "organicMatter": soil.organic_matter,
            "phLevel": soil.ph_level,
            "soilTaxonomy": {
                "order": soil.tax_order,
                "suborder": soil.tax_suborder,
                "greatGroup": soil.tax_great_group,
                "subgroup": soil.tax_subgroup,
            },
            "suitability": {
                "agricultural": soil.agricultural_suitability,
                "drainage": soil.drainage_class,
                "erosion": soil.erosion_factor,
            },
            "physicalProperties": {
                "texture": soil.texture,
                "slope": soil.slope,
                "depth": soil.depth,
            },
        },
        source=SOIL_SOURCE,
        description=f"Soil component properties for {settings.area_name}, Oahu",
        last_updated="2025-07-22",
        matchingComponents=len(matches),
    )
