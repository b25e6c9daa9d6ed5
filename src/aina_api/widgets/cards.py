"""
widgets/cards.py — Summary cards, tables and chart series.

Each function takes a handler payload and returns the structure its
dashboard widget renders.
"""

from __future__ import annotations

from datetime import datetime
from operator import itemgetter
from typing import Any

from aina_shared.categorize import group_zones_by_tier
from aina_shared.constants import ZONE_DESCRIPTIONS

GAGE_HEIGHT_SERIES = "Gage height (ft)"


def geographic_names_table(payload: dict[str, Any]) -> dict[str, Any]:
    rows = [
        {
            "category": category,
            "count": len(features),
            "names": sorted({f["feature_name"] for f in features if f["feature_name"]}),
        }
        for category, features in payload["features"].items()
    ]
    return {"rows": rows, "total": payload["metadata"]["totalFeatures"]}


def soil_card(payload: dict[str, Any]) -> dict[str, Any]:
    taxonomy = payload["soilTaxonomy"]
    return {
        "title": f"{payload['soilSeries']} series",
        "fields": [
            {"label": "Drainage", "value": payload["drainageClass"]},
            {"label": "Hydrologic group", "value": payload["hydrologicGroup"]},
            {"label": "Organic matter", "value": payload["organicMatter"]},
            {"label": "pH", "value": payload["phLevel"]},
            {"label": "Slope", "value": payload["physicalProperties"]["slope"]},
        ],
        "taxonomy": " / ".join(v for v in taxonomy.values() if v),
        "agriculturalSuitability": payload["suitability"]["agricultural"],
    }


def tsunami_zone_summary(payload: dict[str, Any]) -> dict[str, Any]:
    groups = {
        tier: [
            {
                "objectid": zone["objectid"],
                "zoneCode": zone["zone_code"],
                "description": ZONE_DESCRIPTIONS.get(zone["zone_code"], zone["zone_desc"]),
                "areaAcres": zone["areausac"],
            }
            for zone in zones
        ]
        for tier, zones in group_zones_by_tier(payload["zones"], itemgetter("zone_code")).items()
    }
    return {
        "counts": {tier: len(zones) for tier, zones in groups.items()},
        "zones": groups,
    }


def _chart_label(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp).strftime("%b %d, %I:%M %p")
    except ValueError:
        return timestamp


def stream_gauge_chart(payload: dict[str, Any]) -> dict[str, Any]:
    points = [
        {"date": _chart_label(r["timestamp"]), GAGE_HEIGHT_SERIES: r["value"]}
        for r in payload["readings"]
    ]
    values = [r["value"] for r in payload["readings"]]
    return {
        "title": f"{payload['site']['name'] or payload['site']['id']} - Gage Height",
        "series": GAGE_HEIGHT_SERIES,
        "points": points,
        "domain": [min(values), max(values)] if values else None,
    }
