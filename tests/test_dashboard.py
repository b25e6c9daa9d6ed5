"""Tests for the public-information dashboard page."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from aina_api.sources.usgs import UsgsStreamGaugeSource
from tests.conftest import comp_line, write_comp_file

GAUGE = {
    "site_name": "WAIMANALO STREAM AT WAIMANALO, OAHU, HI",
    "variable": "Gage height, ft",
    "readings": [
        {"timestamp": "2025-07-20T10:00:00.000-10:00", "value": 7.10},
        {"timestamp": "2025-07-20T10:15:00.000-10:00", "value": 7.25},
    ],
}


@pytest.fixture()
def fetch_readings():
    with patch.object(UsgsStreamGaugeSource, "fetch_readings", new=AsyncMock(return_value=GAUGE)) as mock:
        yield mock


def test_missing_params_returns_400(client):
    assert client.get("/dashboard/public-information").status_code == 400


def test_all_sections_render(client, data_dir, fetch_readings, waimanalo):
    response = client.get("/dashboard/public-information", params=waimanalo)
    assert response.status_code == 200
    page = response.json()

    assert page["location"] == {"lat": 21.33861, "lon": -157.70005}
    assert page["soil"]["title"] == "Pohakupu series"
    assert page["soil"]["agriculturalSuitability"] == "Good"
    assert page["streamGauge"]["domain"] == [7.10, 7.25]
    assert len(page["shoreline"]["markers"]) == 12
    assert page["geographicNames"]["total"] == 8
    assert page["tsunami"]["summary"]["counts"] == {
        "evacuation": 1,
        "extreme_evacuation": 1,
        "safe": 1,
        "other": 0,
    }
    assert len(page["tsunami"]["map"]["shapes"]) == 3


def test_failed_section_does_not_fail_page(client, data_dir, fetch_readings, waimanalo):
    fetch_readings.side_effect = httpx.ReadTimeout("timed out")
    write_comp_file(data_dir / "tabular" / "comp.txt", [comp_line(compname="Makiki")])

    response = client.get("/dashboard/public-information", params=waimanalo)
    assert response.status_code == 200
    page = response.json()

    assert page["streamGauge"] == {"error": "Failed to fetch stream gauge data"}
    assert page["soil"] == {"error": "Soil health data not available for Waimanalo area"}
    assert page["geographicNames"]["total"] == 8


def test_unexpected_section_error_is_contained(client, data_dir, fetch_readings, waimanalo):
    fetch_readings.side_effect = KeyError("value")
    response = client.get("/dashboard/public-information", params=waimanalo)
    assert response.status_code == 200
    page = response.json()
    assert page["streamGauge"] == {"error": "Failed to load stream gauge data"}
    assert page["soil"]["title"] == "Pohakupu series"
