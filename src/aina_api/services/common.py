"""Helpers shared by the data services."""

from __future__ import annotations

from typing import Any, TypeVar

from aina_shared.geo import AreaOfInterest, Point

from aina_api.responses import DashboardError
from aina_api.sources.base import SourceNotFoundError, StaticSource

T = TypeVar("T")


def load_source(source: StaticSource[T], failure_message: str) -> list[T]:
    """
    Run a static source, translating failures into DashboardError.

    A missing file is NOT_FOUND; anything else raised while reading or
    parsing is UPSTREAM_FAILURE carrying the underlying message.
    """
    try:
        return source.run()
    except SourceNotFoundError as exc:
        raise DashboardError.not_found(failure_message, error=str(exc)) from exc
    except Exception as exc:
        raise DashboardError.upstream(failure_message, exc) from exc


def location_echo(location: Point, area: AreaOfInterest | None = None) -> dict[str, Any]:
    echo: dict[str, Any] = {"lat": location.lat, "lon": location.lon}
    if area is not None:
        echo["area"] = area.name
    return echo
