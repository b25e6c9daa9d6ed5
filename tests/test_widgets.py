"""Tests for dashboard widget shaping."""

from __future__ import annotations

import pytest

from aina_api.widgets import (
    geographic_names_table,
    shoreline_marker_layer,
    stream_gauge_chart,
    tsunami_zone_layer,
    tsunami_zone_summary,
)
from aina_api.widgets.cards import GAGE_HEIGHT_SERIES
from aina_api.widgets.map_layers import polygons_to_positions, ring_to_positions

LOCATION = {"lat": 21.33861, "lon": -157.70005, "area": "Waimanalo"}


def zone(objectid, code, geometry, desc="", acres=0.0):
    return {
        "objectid": objectid,
        "zone_code": code,
        "zone_type": "Tsunami Evacuation Zone",
        "zone_desc": desc,
        "areausac": acres,
        "island": "OAHU",
        "geometry": geometry,
    }


SQUARE = [[-157.7, 21.34], [-157.69, 21.34], [-157.69, 21.33], [-157.7, 21.34]]


class TestMapLayers:
    def test_ring_swaps_to_lat_lon(self):
        assert ring_to_positions([[-157.7, 21.34, 3.0]]) == [[21.34, -157.7]]

    def test_short_rings_are_skipped(self):
        geometry = {"type": "MultiPolygon", "coordinates": [[SQUARE], [[[-157.8, 21.3], [-157.79, 21.3]]]]}
        assert polygons_to_positions(geometry) == [[[c[1], c[0]] for c in SQUARE]]

    def test_unknown_geometry_type(self):
        assert polygons_to_positions({"type": "Point", "coordinates": [-157.7, 21.34]}) == []

    def test_tsunami_layer_colors_and_legend(self):
        payload = {
            "location": LOCATION,
            "zones": [
                zone(1, 1, {"type": "Polygon", "coordinates": [SQUARE]}),
                zone(2, 4, {"type": "Polygon", "coordinates": [SQUARE]}),
                zone(3, 2, {"type": "Polygon", "coordinates": [SQUARE[:2]]}),
            ],
        }
        layer = tsunami_zone_layer(payload)
        assert layer["center"] == [21.33861, -157.70005]
        assert [(s["objectid"], s["color"]) for s in layer["shapes"]] == [(1, "red"), (2, "gray")]
        assert layer["shapes"][1]["label"] == "Zone 4"
        assert [entry["zoneCode"] for entry in layer["legend"]] == [1, 2, 3]

    def test_shoreline_markers(self):
        payload = {
            "location": LOCATION,
            "shorelinePoints": [
                {
                    "lat": 21.33246,
                    "lon": -157.69364,
                    "name": "Waimanalo Beach Park",
                    "type": "beach_park",
                    "properties": {"lifeguard": "Yes", "shore_type": "Sand"},
                }
            ],
            "metadata": {"shorelineLength": 2.34567},
        }
        layer = shoreline_marker_layer(payload)
        marker = layer["markers"][0]
        assert marker["position"] == [21.33246, -157.69364]
        assert marker["popup"]["lifeguard"] == "Yes"
        assert marker["popup"]["access"] is None
        assert layer["lengthKm"] == 2.35


class TestCards:
    def test_geographic_names_table(self):
        payload = {
            "features": {
                "streams": [{"feature_name": "Waimanalo Stream"}, {"feature_name": "Waimanalo Ditch"}],
                "bays": [],
                "other": [{"feature_name": ""}],
            },
            "metadata": {"totalFeatures": 3},
        }
        table = geographic_names_table(payload)
        assert table["rows"][0] == {
            "category": "streams",
            "count": 2,
            "names": ["Waimanalo Ditch", "Waimanalo Stream"],
        }
        assert table["rows"][2] == {"category": "other", "count": 1, "names": []}
        assert table["total"] == 3

    def test_tsunami_summary_groups_by_tier(self):
        payload = {
            "zones": [
                zone(1, 1, {}, acres=812.5),
                zone(2, 3, {}),
                zone(3, 9, {}, desc="unmapped"),
            ]
        }
        summary = tsunami_zone_summary(payload)
        assert summary["counts"] == {"evacuation": 1, "extreme_evacuation": 0, "safe": 1, "other": 1}
        assert summary["zones"]["evacuation"][0]["description"] == (
            "Evacuate immediately for any tsunami warning"
        )
        assert summary["zones"]["other"][0]["description"] == "unmapped"

    def test_stream_gauge_chart(self):
        payload = {
            "site": {"id": "16249000", "name": None},
            "readings": [
                {"timestamp": "2025-07-20T10:15:00.000-10:00", "value": 7.09},
                {"timestamp": "garbled", "value": 7.3},
            ],
        }
        chart = stream_gauge_chart(payload)
        assert chart["title"] == "16249000 - Gage Height"
        assert chart["points"][0] == {"date": "Jul 20, 10:15 AM", GAGE_HEIGHT_SERIES: 7.09}
        assert chart["points"][1]["date"] == "garbled"
        assert chart["domain"] == [7.09, 7.3]

    @pytest.mark.parametrize("readings", [[]])
    def test_stream_gauge_chart_without_readings(self, readings):
        chart = stream_gauge_chart({"site": {"id": "16249000", "name": "Gauge"}, "readings": readings})
        assert chart["points"] == []
        assert chart["domain"] is None
