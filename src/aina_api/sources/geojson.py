"""
sources/geojson.py — GeoJSON FeatureCollection readers.

GnisSource         — USGS GNIS place names (points, lines, polygons)
TsunamiZoneSource  — Hawaii tsunami evacuation zones (polygons)

Features that are missing required properties, have no geometry, or
resolve to an invalid coordinate are dropped rather than failing the read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from aina_shared.models.geography import GeographicFeature
from aina_shared.models.tsunami import TsunamiZone

from aina_api.sources.base import SourceFormatError, StaticSource


def read_feature_collection(path: Path) -> list[dict[str, Any]]:
    """Load a FeatureCollection file and return its `features` list."""
    with path.open(encoding="utf-8") as fh:
        try:
            document = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SourceFormatError(f"{path.name} is not valid JSON: {exc}") from exc

    features = document.get("features") if isinstance(document, dict) else None
    if not isinstance(features, list):
        raise SourceFormatError(f"{path.name} is not a GeoJSON FeatureCollection")
    return features


class GnisSource(StaticSource[GeographicFeature]):
    name = "GNIS"

    def extract(self) -> list[dict[str, Any]]:
        return read_feature_collection(self._require_file())

    def transform(self, raw: list[dict[str, Any]]) -> list[GeographicFeature]:
        features: list[GeographicFeature] = []
        dropped = 0
        for item in raw:
            try:
                feature = GeographicFeature.from_geojson(item) if isinstance(item, dict) else None
            except (ValidationError, ValueError, TypeError):
                feature = None
            if feature is None:
                dropped += 1
                continue
            features.append(feature)
        if dropped:
            self._log.debug("gnis_features_dropped", dropped=dropped)
        return features


class TsunamiZoneSource(StaticSource[TsunamiZone]):
    name = "TsunamiZones"

    def extract(self) -> list[dict[str, Any]]:
        return read_feature_collection(self._require_file())

    def transform(self, raw: list[dict[str, Any]]) -> list[TsunamiZone]:
        zones: list[TsunamiZone] = []
        for item in raw:
            try:
                zone = TsunamiZone.from_geojson(item) if isinstance(item, dict) else None
            except (ValidationError, ValueError, TypeError):
                zone = None
            if zone is not None:
                zones.append(zone)
        return zones
