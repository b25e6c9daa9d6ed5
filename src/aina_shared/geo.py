"""
geo.py — Point-in-area tests and coordinate helpers.

Two independent acceptance policies are used by the data routes:

  - bounding box:  inclusive lat/lon rectangle (geographic names)
  - radius:        straight-line distance in degrees from a reference
                   point (tsunami zones); not geodesic

Neither handles antimeridian wraparound or polar distortion. Distances in
kilometres (shoreline length) use the haversine formula.

GeoJSON positions are (lon, lat); every helper here returns (lat, lon).

Usage:
    from aina_shared.geo import BoundingBox, Point, haversine_km

    box = BoundingBox(lat_min=21.32, lat_max=21.36, lon_min=-157.75, lon_max=-157.65)
    box.contains(21.33, -157.70)                     # True
    haversine_km(21.33, -157.69, 21.34, -157.70)     # ~1.5
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict

EARTH_RADIUS_KM = 6371.0


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def contains(self, lat: float, lon: float) -> bool:
        """Inclusive on every edge."""
        return (
            self.lat_min <= lat <= self.lat_max
            and self.lon_min <= lon <= self.lon_max
        )


class AreaOfInterest(BaseModel):
    """The fixed area every route filters against."""

    model_config = ConfigDict(frozen=True)

    name: str
    bounds: BoundingBox
    reference: Point
    radius_deg: float

    def in_bounds(self, lat: float, lon: float) -> bool:
        return self.bounds.contains(lat, lon)

    def within_radius(self, lat: float, lon: float) -> bool:
        distance = degree_distance(lat, lon, self.reference.lat, self.reference.lon)
        return distance <= self.radius_deg


def degree_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance in raw degrees."""
    return math.hypot(lat1 - lat2, lon1 - lon2)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def path_length_km(points: list[tuple[float, float]]) -> float:
    """Sum of haversine distances between consecutive (lat, lon) points."""
    return sum(
        haversine_km(a[0], a[1], b[0], b[1]) for a, b in zip(points, points[1:])
    )


def is_valid_coordinate(lat: Any, lon: Any) -> bool:
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False
    if isinstance(lat, bool) or isinstance(lon, bool):
        return False
    if math.isnan(lat) or math.isnan(lon):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def _position(value: Any) -> tuple[float, float] | None:
    """Turn a GeoJSON [lon, lat, ...] position into (lat, lon)."""
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return None
    lon, lat = value[0], value[1]
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return None
    return float(lat), float(lon)


def representative_point(geometry: dict[str, Any] | None) -> tuple[float, float]:
    """
    Resolve a single (lat, lon) for a feature geometry.

    Point → its coordinate; LineString → first vertex; Polygon → first
    vertex of the first ring. Anything else (or an empty geometry)
    resolves to (0.0, 0.0).
    """
    if not isinstance(geometry, dict):
        return 0.0, 0.0
    coords = geometry.get("coordinates")
    if not isinstance(coords, list) or not coords:
        return 0.0, 0.0

    geom_type = geometry.get("type")
    resolved: tuple[float, float] | None = None
    if geom_type == "Point":
        resolved = _position(coords)
    elif geom_type == "LineString":
        resolved = _position(coords[0])
    elif geom_type == "Polygon" and isinstance(coords[0], list) and coords[0]:
        resolved = _position(coords[0][0])
    return resolved if resolved is not None else (0.0, 0.0)


def first_ring_point(geometry: dict[str, Any] | None) -> tuple[float, float] | None:
    """
    First coordinate of the first ring of a Polygon or MultiPolygon.

    Returns (lat, lon), or None when the geometry has no usable ring.
    """
    if not isinstance(geometry, dict):
        return None
    coords = geometry.get("coordinates")
    try:
        if geometry.get("type") == "MultiPolygon":
            return _position(coords[0][0][0])
        if geometry.get("type") == "Polygon":
            return _position(coords[0][0])
    except (IndexError, KeyError, TypeError):
        return None
    return None
