"""
sources/shoreline.py — Waimanalo shoreline public access points.

The access points are a small fixed set, embedded here as a GeoJSON
FeatureCollection rather than read from disk. Points are kept in
shoreline order (south to north) so consecutive distances trace the coast.
"""

from __future__ import annotations

from typing import Any, Final

from aina_shared.models.shoreline import ShorelinePoint

from aina_api.sources.base import StaticSource


def _access_point(
    objectid: int,
    name: str,
    lat: float,
    lon: float,
    coordinates: tuple[float, float],
    *,
    owner: str = "State of Hawaii",
    dedicated: int = 0,
    sign: str | None = None,
    amenities: dict[str, str] | None = None,
) -> dict[str, Any]:
    facilities = {
        "restroom": "No",
        "showers": "No",
        "picnic_fac": "No",
        "trash_rece": "No",
        "water": "No",
        "phone": "No",
        "lifeguard": "No",
        **(amenities or {}),
    }
    return {
        "type": "Feature",
        "properties": {
            "objectid": objectid,
            "map_id": objectid,
            "name": name,
            "latitude": lat,
            "longitude": lon,
            "parcel_own": owner,
            "parcel_ope": "City & County of Honolulu",
            "access_typ": "Vertical and Horizontal",
            "access_sur": "Grass",
            "dedicated_": dedicated,
            "shore_type": "Sand",
            **facilities,
            "alt_name": name,
            "sign_word": sign or name,
        },
        "geometry": {"type": "Point", "coordinates": list(coordinates)},
    }


_FULL_SERVICE = {
    "restroom": "Yes",
    "showers": "Yes",
    "picnic_fac": "Yes",
    "trash_rece": "Yes",
    "water": "Yes",
    "phone": "Yes",
    "lifeguard": "Yes",
}

SHORELINE_ACCESS_FEATURES: Final[dict[str, Any]] = {
    "type": "FeatureCollection",
    "name": "Shoreline_Public_Access",
    "features": [
        _access_point(
            46, "Waimanalo Beach Park", 21.33246, -157.69364,
            (-157.693625591908557, 21.332456578943688),
            owner="State of Hawaii & DHHL (Licensed to City)", dedicated=108,
            amenities=_FULL_SERVICE,
        ),
        _access_point(
            47, "Laumilo I", 21.33416, -157.69575,
            (-157.695735592074186, 21.33415657937293),
            sign="101B, Public Right Of Way To Beach",
        ),
        _access_point(
            48, "Laumilo H", 21.33502, -157.69633,
            (-157.696315592294667, 21.335016579315543),
            sign="101A, Public Right Of Way To Beach",
        ),
        _access_point(
            49, "Laumilo G", 21.33578, -157.69686,
            (-157.69684559176082, 21.335776579385428),
            sign="100G, Public Right Of Way To Beach",
        ),
        _access_point(
            50, "Laumilo F", 21.3366, -157.69737,
            (-157.697355591973349, 21.336596579217193),
            sign="100F, Public Right Of Way To Beach",
        ),
        _access_point(
            51, "Laumilo E", 21.33743, -157.69796,
            (-157.697945591715325, 21.337426579810803),
            sign="100E, Public Right Of Way To Beach",
        ),
        _access_point(
            52, "Laumilo D", 21.33823, -157.69854,
            (-157.698525591967467, 21.33822657922595),
            sign="100D, Public Right Of Way To Beach",
        ),
        _access_point(
            53, "Laumilo C", 21.33905, -157.69911,
            (-157.699095591857343, 21.339046579219229),
            sign="100C, Public Right Of Way To Beach",
        ),
        _access_point(
            54, "Laumilo B", 21.33991, -157.69959,
            (-157.699575592675842, 21.339906579876804),
            sign="100B, Public Right Of Way To Beach",
        ),
        _access_point(
            55, "Laumilo A", 21.3407, -157.7001,
            (-157.70008559273839, 21.340696579973734),
            sign="100A, Public Right Of Way To Beach",
        ),
        _access_point(
            56, "Waimanalo Bay Beach Park", 21.3443, -157.7023,
            (-157.702285592235739, 21.344296579975868),
            owner="City & County of Honolulu", dedicated=220,
            amenities=_FULL_SERVICE,
        ),
        _access_point(
            57, "Bellows Field Beach Park", 21.34556, -157.71013,
            (-157.710115592432118, 21.345556579626308),
            owner="United States of America", dedicated=65,
            amenities={**_FULL_SERVICE, "phone": "No"},
            sign="No Vehicles On The Beach   The Following Are Prohibited…",
        ),
    ],
}


class ShorelineAccessSource(StaticSource[ShorelinePoint]):
    name = "ShorelineAccess"

    def __init__(self, collection: dict[str, Any] | None = None) -> None:
        super().__init__(path=None)
        self._collection = collection if collection is not None else SHORELINE_ACCESS_FEATURES

    def extract(self) -> list[dict[str, Any]]:
        return list(self._collection["features"])

    def transform(self, raw: list[dict[str, Any]]) -> list[ShorelinePoint]:
        points: list[ShorelinePoint] = []
        for feature in raw:
            try:
                points.append(ShorelinePoint.from_geojson(feature))
            except (KeyError, TypeError, ValueError):
                self._log.debug("shoreline_point_dropped", feature=feature.get("properties"))
        return points
