"""
aina_shared.models — Pydantic models for every data category.

Static-file models provide `.from_geojson(feature)`; database-backed
models provide `.from_db_row(row)`.
"""

from aina_shared.models.geography import GeographicFeature
from aina_shared.models.metrics import LocationMetrics, MetricPoint, MetricRow
from aina_shared.models.shoreline import ShorelinePoint
from aina_shared.models.soil import SoilRecord
from aina_shared.models.tsunami import TsunamiZone, ZoneGeometry

__all__ = [
    "GeographicFeature",
    "ShorelinePoint",
    "SoilRecord",
    "TsunamiZone",
    "ZoneGeometry",
    "MetricRow",
    "MetricPoint",
    "LocationMetrics",
]
