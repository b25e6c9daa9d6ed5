"""
models/metrics.py — Sensor metric rows and their per-location grouping.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

UNKNOWN = "unknown"


class MetricRow(BaseModel):
    """One row of the metric ⋈ sensor_mala ⋈ mala ⋈ metric_type join."""

    timestamp: datetime | None = None
    value: float | None = None
    type_name: str | None = None
    mala_name: str | None = None

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "MetricRow":
        return cls(**row)


class MetricPoint(BaseModel):
    timestamp: str
    value: float


class LocationMetrics(BaseModel):
    """All metric series for one mala (garden patch), keyed by metric type."""

    name: str
    data: dict[str, list[MetricPoint]] = Field(default_factory=dict)
