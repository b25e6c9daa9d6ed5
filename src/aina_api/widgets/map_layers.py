"""
widgets/map_layers.py — Leaflet-ready map layers.

Handler payloads carry GeoJSON (lon, lat) rings; the map client wants
[lat, lon] positions. Rings with fewer than three positions cannot be
drawn as polygons and are skipped.
"""

from __future__ import annotations

from typing import Any

from aina_shared.constants import ZONE_COLORS, ZONE_DESCRIPTIONS, ZONE_LABELS

MIN_RING_POSITIONS = 3


def ring_to_positions(ring: list[Any]) -> list[list[float]]:
    positions: list[list[float]] = []
    for coord in ring:
        if isinstance(coord, (list, tuple)) and len(coord) >= 2:
            positions.append([coord[1], coord[0]])
    return positions


def polygons_to_positions(geometry: dict[str, Any]) -> list[list[list[float]]]:
    """Flatten a Polygon or MultiPolygon into drawable [lat, lon] rings."""
    coordinates = geometry.get("coordinates") or []
    if geometry.get("type") == "Polygon":
        polygons = [coordinates]
    elif geometry.get("type") == "MultiPolygon":
        polygons = coordinates
    else:
        return []

    rings: list[list[list[float]]] = []
    for polygon in polygons:
        for ring in polygon or []:
            positions = ring_to_positions(ring or [])
            if len(positions) >= MIN_RING_POSITIONS:
                rings.append(positions)
    return rings


def tsunami_zone_layer(payload: dict[str, Any]) -> dict[str, Any]:
    center = payload["location"]
    shapes = [
        {
            "objectid": zone["objectid"],
            "zoneCode": zone["zone_code"],
            "color": ZONE_COLORS.get(zone["zone_code"], "gray"),
            "label": ZONE_LABELS.get(zone["zone_code"], f"Zone {zone['zone_code']}"),
            "positions": polygons_to_positions(zone["geometry"]),
        }
        for zone in payload["zones"]
    ]
    return {
        "center": [center["lat"], center["lon"]],
        "shapes": [s for s in shapes if s["positions"]],
        "legend": [
            {"zoneCode": code, "color": ZONE_COLORS[code], "label": label,
             "description": ZONE_DESCRIPTIONS[code]}
            for code, label in ZONE_LABELS.items()
        ],
    }


def shoreline_marker_layer(payload: dict[str, Any]) -> dict[str, Any]:
    center = payload["location"]
    markers = []
    for point in payload["shorelinePoints"]:
        props = point.get("properties") or {}
        markers.append(
            {
                "position": [point["lat"], point["lon"]],
                "name": point.get("name"),
                "type": point.get("type"),
                "popup": {
                    "access": props.get("access_type"),
                    "shore": props.get("shore_type"),
                    "lifeguard": props.get("lifeguard"),
                    "restroom": props.get("restroom"),
                    "showers": props.get("showers"),
                },
            }
        )
    return {
        "center": [center["lat"], center["lon"]],
        "markers": markers,
        "lengthKm": round(payload["metadata"]["shorelineLength"], 2),
    }
