"""
models/shoreline.py — Shoreline public access points.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from aina_shared.constants import SHORELINE_DEFAULT_TYPE, SHORELINE_TYPE_RULES

# Source column (truncated shapefile name) → response property name
_PROPERTY_NAMES: dict[str, str] = {
    "parcel_own": "parcel_owner",
    "parcel_ope": "parcel_operator",
    "access_typ": "access_type",
    "access_sur": "access_surface",
    "dedicated_": "dedicated_area",
    "shore_type": "shore_type",
    "restroom": "restroom",
    "showers": "showers",
    "picnic_fac": "picnic_facilities",
    "trash_rece": "trash_receptacles",
    "water": "water",
    "phone": "phone",
    "lifeguard": "lifeguard",
    "sign_word": "sign_words",
}


def point_type_for(name: str | None) -> str:
    if name:
        for needle, point_type in SHORELINE_TYPE_RULES:
            if needle in name:
                return point_type
    return SHORELINE_DEFAULT_TYPE


class ShorelinePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    elevation: float | None = 0
    type: str = SHORELINE_DEFAULT_TYPE
    name: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_geojson(cls, feature: dict[str, Any]) -> "ShorelinePoint":
        lon, lat = feature["geometry"]["coordinates"][:2]
        props = feature.get("properties") or {}
        name = props.get("name")
        return cls(
            lat=lat,
            lon=lon,
            elevation=0,
            type=point_type_for(name),
            name=name,
            properties={
                target: props.get(source) for source, target in _PROPERTY_NAMES.items()
            },
        )
