"""
aina_api.sources — static-file and upstream data readers.

  GnisSource             — USGS GNIS place names (GeoJSON)
  TsunamiZoneSource      — tsunami evacuation zones (GeoJSON)
  SoilComponentSource    — SSURGO comp.txt (pipe-delimited)
  ShorelineAccessSource  — embedded shoreline access points
  UsgsStreamGaugeSource  — USGS NWIS gage height (HTTP JSON)
"""

from aina_api.sources.base import (
    SchemaDriftError,
    SourceFormatError,
    SourceNotFoundError,
    StaticSource,
)
from aina_api.sources.geojson import GnisSource, TsunamiZoneSource
from aina_api.sources.shoreline import ShorelineAccessSource
from aina_api.sources.tabular import SoilComponentSource
from aina_api.sources.usgs import UnexpectedResponseError, UsgsStreamGaugeSource

__all__ = [
    "StaticSource",
    "SourceNotFoundError",
    "SourceFormatError",
    "SchemaDriftError",
    "GnisSource",
    "TsunamiZoneSource",
    "SoilComponentSource",
    "ShorelineAccessSource",
    "UsgsStreamGaugeSource",
    "UnexpectedResponseError",
]
