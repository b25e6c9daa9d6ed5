"""
constants.py — shared constants used across the API and the CLI.

Feature-class buckets, tsunami zone tiers, the soil-series allow-list and
the source provenance strings live here so the routes, the dashboard
widgets and the tests agree on them.
"""

from __future__ import annotations

from typing import Final, Literal

# ---------------------------------------------------------------------------
# GNIS feature classes → response bucket (ordered, first match wins)
# ---------------------------------------------------------------------------
FEATURE_CLASS_BUCKETS: Final[tuple[tuple[str, frozenset[str]], ...]] = (
    ("populated_places", frozenset({"Populated Place", "Census", "Civil"})),
    ("streams", frozenset({"Stream", "Canal"})),
    ("bays", frozenset({"Bay"})),
    ("valleys", frozenset({"Valley"})),
    ("mountains", frozenset({"Summit", "Ridge"})),
    ("beaches", frozenset({"Beach"})),
)

OTHER_BUCKET: Final[str] = "other"

# ---------------------------------------------------------------------------
# Tsunami evacuation zone tiers
# ---------------------------------------------------------------------------
ZoneTier = Literal["evacuation", "extreme_evacuation", "safe"]

ZONE_TIERS: Final[dict[int, ZoneTier]] = {
    1: "evacuation",
    2: "extreme_evacuation",
    3: "safe",
}

ZONE_DESCRIPTIONS: Final[dict[int, str]] = {
    1: "Evacuate immediately for any tsunami warning",
    2: "Evacuate for extreme tsunami warnings",
    3: "Safe areas to evacuate to",
}

ZONE_COLORS: Final[dict[int, str]] = {
    1: "red",
    2: "orange",
    3: "green",
}

ZONE_LABELS: Final[dict[int, str]] = {
    1: "Zone 1 - Standard Evacuation",
    2: "Zone 2 - Extreme Evacuation",
    3: "Zone 3 - Safe Zone",
}

# ---------------------------------------------------------------------------
# Soil series recognised for the Waimanalo area
# ---------------------------------------------------------------------------
WAIMANALO_SOIL_SERIES: Final[tuple[str, ...]] = (
    "Kawaihapai",
    "Pohakupu",
    "Lolekaa",
    "Haleiwa",
    "Hanalei",
)

# ---------------------------------------------------------------------------
# Shoreline point type tags, tested in order against the access point name
# ---------------------------------------------------------------------------
SHORELINE_TYPE_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("Beach Park", "beach_park"),
    ("Laumilo", "access_point"),
)
SHORELINE_DEFAULT_TYPE: Final[str] = "access"

# ---------------------------------------------------------------------------
# Provenance strings for response metadata blocks
# ---------------------------------------------------------------------------
GNIS_SOURCE: Final[str] = "USGS Geographic Names Information System (GNIS)"
SHORELINE_SOURCE: Final[str] = "Shoreline Public Access Data"
SOIL_SOURCE: Final[str] = "USDA NRCS Web Soil Survey (SSURGO component table)"
TSUNAMI_SOURCE: Final[str] = "Hawaii State GIS Program"
USGS_NWIS_SOURCE: Final[str] = "USGS National Water Information System"

METRICS_CACHE_KEY: Final[str] = "all_sensors_per_patch"
