"""
models/tsunami.py — Tsunami evacuation zone polygons.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from aina_shared.geo import first_ring_point


def _as_int(value: Any) -> int:
    """Integer from an int, a whole float (1.0) or their string forms."""
    return int(float(str(value)))


class ZoneGeometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    coordinates: list[Any]


class TsunamiZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    objectid: int
    zone_code: int
    zone_type: str
    zone_desc: str = ""
    areausac: float = 0.0
    island: str | None = None
    geometry: ZoneGeometry

    @classmethod
    def from_geojson(cls, feature: dict[str, Any]) -> "TsunamiZone | None":
        """
        Build a zone from a GeoJSON Feature dict.

        Returns None when properties or geometry is missing or not an
        object, and when objectid, zone_code or zone_type is missing.
        """
        props = feature.get("properties")
        geometry = feature.get("geometry")
        if not (isinstance(props, dict) and props and isinstance(geometry, dict) and geometry):
            return None

        objectid = props.get("objectid")
        zone_code = props.get("zone_code")
        zone_type = props.get("zone_type")
        if not objectid or zone_code is None or not zone_type:
            return None

        return cls(
            objectid=_as_int(objectid),
            zone_code=_as_int(zone_code),
            zone_type=str(zone_type),
            zone_desc=str(props.get("zone_desc") or ""),
            areausac=float(str(props.get("areausac") or 0)),
            island=props.get("island"),
            geometry=ZoneGeometry(
                type=geometry.get("type", ""),
                coordinates=geometry.get("coordinates") or [],
            ),
        )

    @property
    def anchor(self) -> tuple[float, float] | None:
        """(lat, lon) of the first ring's first coordinate."""
        return first_ring_point(self.geometry.model_dump())
