"""
models/geography.py — GNIS geographic place-name features.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from aina_shared.geo import is_valid_coordinate, representative_point


def _or(value: Any, default: Any) -> Any:
    """Source properties treat null, 0 and "" alike as absent."""
    return value if value else default


class GeographicFeature(BaseModel):
    """One named place from the GNIS GeoJSON export."""

    model_config = ConfigDict(frozen=True)

    objectid: int = 0
    feature_id: int = 0
    map_name: str = ""
    feature_name: str = ""
    feature_class: str = ""
    state_numeric: int = 0
    county_name: str = ""
    county_numeric: int = 0
    prim_lat_dec: float
    prim_long_dec: float
    source_lat_dec: float
    source_long_dec: float
    lat: float
    lon: float

    @classmethod
    def from_geojson(cls, feature: dict[str, Any]) -> "GeographicFeature | None":
        """
        Build a feature from a GeoJSON Feature dict.

        Returns None when properties or geometry is missing or not an object,
        or when its resolved coordinate is not a valid lat/lon.
        """
        props = feature.get("properties")
        geometry = feature.get("geometry")
        if not (isinstance(props, dict) and props and isinstance(geometry, dict) and geometry):
            return None

        lat, lon = representative_point(geometry)
        if not is_valid_coordinate(lat, lon):
            return None

        return cls(
            objectid=_or(props.get("objectid"), 0),
            feature_id=_or(props.get("feature_id"), 0),
            map_name=_or(props.get("map_name"), ""),
            feature_name=_or(props.get("feature_name"), ""),
            feature_class=_or(props.get("feature_class"), ""),
            state_numeric=_or(props.get("state_numeric"), 0),
            county_name=_or(props.get("county_name"), ""),
            county_numeric=_or(props.get("county_numeric"), 0),
            prim_lat_dec=_or(props.get("prim_lat_dec"), lat),
            prim_long_dec=_or(props.get("prim_long_dec"), lon),
            source_lat_dec=_or(props.get("source_lat_dec"), lat),
            source_long_dec=_or(props.get("source_long_dec"), lon),
            lat=lat,
            lon=lon,
        )
