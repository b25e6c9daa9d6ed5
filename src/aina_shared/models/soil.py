"""
models/soil.py — Soil component records from the SSURGO tabular export.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SoilRecord(BaseModel):
    """Selected fields of one comp.txt row, all kept as source strings."""

    model_config = ConfigDict(frozen=True)

    soil_series: str = ""
    drainage_class: str = ""
    hydrologic_group: str = ""
    erosion_factor: str = ""
    organic_matter: str = ""
    ph_level: str = ""
    tax_order: str = ""
    tax_suborder: str = ""
    tax_great_group: str = ""
    tax_subgroup: str = ""
    texture: str = ""
    slope: str = "Unknown"
    depth: str = "Unknown"

    @classmethod
    def from_fields(cls, fields: dict[str, str]) -> "SoilRecord":
        """Build from a column-name → value mapping (see sources.tabular)."""
        slope_low = fields.get("slope_l", "")
        slope_high = fields.get("slope_h", "")
        slope = f"{slope_low}-{slope_high}%" if slope_low and slope_high else "Unknown"
        return cls(
            soil_series=fields.get("compname", ""),
            drainage_class=fields.get("drainagecl", ""),
            hydrologic_group=fields.get("hydgrp", ""),
            erosion_factor=fields.get("erocl", ""),
            organic_matter=fields.get("om_r", ""),
            ph_level=fields.get("ph1to1h2o_r", ""),
            tax_order=fields.get("taxorder", ""),
            tax_suborder=fields.get("taxsuborder", ""),
            tax_great_group=fields.get("taxgrtgroup", ""),
            tax_subgroup=fields.get("taxsubgrp", ""),
            texture=fields.get("texture", ""),
            slope=slope,
            depth=fields.get("resdept_r") or "Unknown",
        )

    @property
    def agricultural_suitability(self) -> str:
        if self.drainage_class == "Well drained":
            return "Good"
        if self.drainage_class == "Moderately well drained":
            return "Moderate"
        return "Poor"
