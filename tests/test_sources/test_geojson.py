"""
tests/test_sources/test_geojson.py — GNIS and tsunami zone readers.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from aina_api.sources.base import SourceFormatError, SourceNotFoundError
from aina_api.sources.geojson import GnisSource, TsunamiZoneSource


def write_collection(path: Path, features: list) -> Path:
    path.write_text(json.dumps({"type": "FeatureCollection", "features": features}))
    return path


GOOD_PLACE = {
    "properties": {"feature_name": "Waimanalo", "feature_class": "Populated Place"},
    "geometry": {"type": "Point", "coordinates": [-157.7161, 21.3428]},
}


class TestGnisSource:
    def test_drops_features_without_geometry_or_valid_coordinates(self, fixture_path: Path):
        features = GnisSource(fixture_path / "gnis_sample.geojson").run()
        names = [f.feature_name for f in features]
        assert len(features) == 9
        assert "No Geometry" not in names
        assert "Bad Latitude" not in names

    def test_resolves_coordinates_per_geometry_type(self, fixture_path: Path):
        features = {
            f.feature_name: f for f in GnisSource(fixture_path / "gnis_sample.geojson").run()
        }
        ditch = features["Waimanalo Ditch"]
        assert (ditch.lat, ditch.lon) == (21.335, -157.705)
        beach = features["Waimanalo Beach"]
        assert (beach.lat, beach.lon) == (21.333, -157.694)

    def test_missing_primary_coordinates_fall_back_to_geometry(self, fixture_path: Path):
        features = {
            f.feature_name: f for f in GnisSource(fixture_path / "gnis_sample.geojson").run()
        }
        town = features["Waimanalo"]
        assert town.prim_lat_dec == town.lat == 21.3428
        assert town.source_long_dec == town.lon == -157.7161

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SourceNotFoundError):
            GnisSource(tmp_path / "missing.geojson").run()

    def test_not_a_feature_collection(self, tmp_path: Path):
        path = tmp_path / "bad.geojson"
        path.write_text('{"type": "Feature"}')
        with pytest.raises(SourceFormatError):
            GnisSource(path).run()

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.geojson"
        path.write_text("{not json")
        with pytest.raises(SourceFormatError):
            GnisSource(path).check()

    @pytest.mark.parametrize(
        "bad",
        [
            {"properties": ["junk"], "geometry": GOOD_PLACE["geometry"]},
            {"properties": "junk", "geometry": GOOD_PLACE["geometry"]},
            {"properties": GOOD_PLACE["properties"], "geometry": "POINT(-157.7 21.3)"},
            "not a feature",
        ],
    )
    def test_malformed_feature_is_dropped_not_fatal(self, tmp_path: Path, bad):
        path = write_collection(tmp_path / "gnis.geojson", [GOOD_PLACE, bad])
        assert [f.feature_name for f in GnisSource(path).run()] == ["Waimanalo"]


class TestTsunamiZoneSource:
    def test_skips_zones_missing_required_properties(self, fixture_path: Path):
        zones = TsunamiZoneSource(fixture_path / "tsunami_sample.geojson").run()
        assert [z.objectid for z in zones] == [101, 102, 103, 104, 106]

    def test_coerces_string_properties(self, fixture_path: Path):
        zones = {z.objectid: z for z in TsunamiZoneSource(fixture_path / "tsunami_sample.geojson").run()}
        assert zones[102].zone_code == 2
        assert zones[102].areausac == pytest.approx(1500.25)
        assert zones[103].zone_desc == ""

    def test_anchor_is_first_ring_first_coordinate(self, fixture_path: Path):
        zones = {z.objectid: z for z in TsunamiZoneSource(fixture_path / "tsunami_sample.geojson").run()}
        assert zones[101].anchor == (21.34, -157.7)
        assert zones[102].anchor == (21.36, -157.72)

    @pytest.mark.parametrize(
        "bad",
        [
            {"properties": "junk", "geometry": {"type": "Polygon", "coordinates": []}},
            {"properties": {"objectid": 9, "zone_code": 1, "zone_type": "t"}, "geometry": "junk"},
            {"properties": {"objectid": 9, "zone_code": "one", "zone_type": "t"},
             "geometry": {"type": "Polygon", "coordinates": []}},
        ],
    )
    def test_malformed_zone_is_dropped_not_fatal(self, tmp_path: Path, bad):
        path = write_collection(tmp_path / "zones.geojson", [bad])
        assert TsunamiZoneSource(path).run() == []

    def test_float_codes_are_kept(self, tmp_path: Path):
        zone = {
            "properties": {"objectid": 7.0, "zone_code": 1.0, "zone_type": "Tsunami Evacuation Zone"},
            "geometry": {"type": "Polygon", "coordinates": [[[-157.7, 21.34], [-157.69, 21.34]]]},
        }
        path = write_collection(tmp_path / "zones.geojson", [zone])
        (parsed,) = TsunamiZoneSource(path).run()
        assert (parsed.objectid, parsed.zone_code) == (7, 1)
