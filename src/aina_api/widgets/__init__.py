"""
aina_api.widgets — presentation shaping for dashboard widgets.

No business logic: every function maps an endpoint payload to the
structure its map, table, card or chart renders.
"""

from aina_api.widgets.cards import (
    geographic_names_table,
    soil_card,
    stream_gauge_chart,
    tsunami_zone_summary,
)
from aina_api.widgets.map_layers import shoreline_marker_layer, tsunami_zone_layer

__all__ = [
    "geographic_names_table",
    "soil_card",
    "stream_gauge_chart",
    "tsunami_zone_summary",
    "shoreline_marker_layer",
    "tsunami_zone_layer",
]
