"""
sources/usgs.py — USGS NWIS instantaneous-values client.

Fetches recent gage-height readings for the Waimanalo Stream gauge.

Endpoint:
  GET {base}/iv/?format=json&sites=16249000&parameterCd=00065&period=P7D

Response shape (trimmed):
  {
    "value": {
      "timeSeries": [
        {
          "sourceInfo": {"siteName": "WAIMANALO STREAM AT WAIMANALO, OAHU, HI", ...},
          "variable": {"variableName": "Gage height, ft", ...},
          "values": [{"value": [{"value": "7.10", "dateTime": "2025-07-20T10:15:00.000-10:00"}]}]
        }
      ]
    }
  }

Usage:
    source = UsgsStreamGaugeSource()
    gauge = await source.fetch_readings()
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from aina_shared.config import settings

log = structlog.get_logger(__name__)


class UnexpectedResponseError(ValueError):
    """The NWIS payload did not contain a readable time series."""


class UsgsStreamGaugeSource:
    """Reads one NWIS site/parameter time series. No retries."""

    name = "USGS-NWIS"

    def __init__(
        self,
        *,
        site: str | None = None,
        parameter_code: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = settings.usgs_base_url.rstrip("/")
        self.site = site or settings.usgs_site
        self.parameter_code = parameter_code or settings.usgs_parameter_code
        self._timeout = timeout if timeout is not None else settings.usgs_timeout
        self._log = log.bind(source_name=self.name, site=self.site)

    async def _fetch(self, period: str) -> dict[str, Any]:
        params = {
            "format": "json",
            "sites": self.site,
            "parameterCd": self.parameter_code,
            "period": period,
        }
        url = f"{self._base_url}/iv/"
        self._log.info("usgs_fetch", url=url, period=period)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedResponseError("USGS API returned a non-JSON body") from exc

    async def fetch_readings(self, period: str | None = None) -> dict[str, Any]:
        """
        Return {site_name, variable, readings: [{timestamp, value}]}.

        Readings whose value cannot be parsed as a float are skipped.

        Raises:
            httpx.HTTPError: transport failure or non-2xx status.
            UnexpectedResponseError: body is not JSON, or lacks
                timeSeries[0].values[0].value.
        """
        payload = await self._fetch(period or settings.usgs_period)
        try:
            series = payload["value"]["timeSeries"][0]
            entries = series["values"][0]["value"]
        except (KeyError, IndexError, TypeError) as exc:
            raise UnexpectedResponseError("Unexpected data structure from USGS API") from exc
        if not entries:
            raise UnexpectedResponseError("Unexpected data structure from USGS API")

        readings: list[dict[str, Any]] = []
        for entry in entries:
            try:
                readings.append(
                    {"timestamp": entry["dateTime"], "value": float(entry["value"])}
                )
            except (KeyError, TypeError, ValueError):
                continue

        self._log.info("usgs_readings_parsed", readings=len(readings))
        return {
            "site_name": (series.get("sourceInfo") or {}).get("siteName"),
            "variable": (series.get("variable") or {}).get("variableName"),
            "readings": readings,
        }
