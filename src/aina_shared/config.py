"""
config.py — pydantic-settings Settings class.

All environment variables for the dashboard are declared here. The API,
the CLI and the static-source readers import `settings` from this module.

Usage:
    from aina_shared.config import settings
    print(settings.supabase_url)
    print(settings.area.reference)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aina_shared.geo import AreaOfInterest, BoundingBox, Point


def _find_dotenv() -> Path | None:
    """Walk up from CWD to find the nearest .env file."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.is_file():
            return candidate
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_find_dotenv() or ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Supabase
    # -------------------------------------------------------------------------
    supabase_url: str = Field(default="http://localhost:54321")
    supabase_anon_key: str = Field(default="")
    supabase_service_key: str = Field(default="")

    # -------------------------------------------------------------------------
    # Static data sources
    # -------------------------------------------------------------------------
    data_dir: Path = Field(default=Path("./data"))
    gnis_geojson_file: str = Field(default="GNIS_(Geographic_Names).geojson")
    tsunami_geojson_file: str = Field(default="Tsunami_Evacuation_-_All_Zones.geojson")
    soil_component_file: str = Field(default="wss_aoi/tabular/comp.txt")
    validate_sources_on_startup: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # Area of interest (Waimanalo, Oahu)
    # -------------------------------------------------------------------------
    area_name: str = Field(default="Waimanalo")
    area_lat_min: float = Field(default=21.32)
    area_lat_max: float = Field(default=21.36)
    area_lon_min: float = Field(default=-157.75)
    area_lon_max: float = Field(default=-157.65)
    area_reference_lat: float = Field(default=21.33861)
    area_reference_lon: float = Field(default=-157.70005)
    area_radius_deg: float = Field(default=0.5)

    # -------------------------------------------------------------------------
    # USGS stream gauge
    # -------------------------------------------------------------------------
    usgs_base_url: str = Field(default="https://waterservices.usgs.gov/nwis")
    usgs_site: str = Field(default="16249000")
    usgs_parameter_code: str = Field(default="00065")
    usgs_period: str = Field(default="P7D")
    usgs_timeout: float = Field(default=30.0)

    # -------------------------------------------------------------------------
    # API server
    # -------------------------------------------------------------------------
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:3001")
    jwt_secret: str = Field(default="change-me-in-production")
    metrics_cache_ttl: float = Field(default=300.0)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")

    # -------------------------------------------------------------------------
    # Derived / computed
    # -------------------------------------------------------------------------
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def gnis_geojson_path(self) -> Path:
        return self.data_dir / self.gnis_geojson_file

    @property
    def tsunami_geojson_path(self) -> Path:
        return self.data_dir / self.tsunami_geojson_file

    @property
    def soil_component_path(self) -> Path:
        return self.data_dir / self.soil_component_file

    @property
    def area(self) -> AreaOfInterest:
        """Bounding box, reference point and radius as one value."""
        return AreaOfInterest(
            name=self.area_name,
            bounds=BoundingBox(
                lat_min=self.area_lat_min,
                lat_max=self.area_lat_max,
                lon_min=self.area_lon_min,
                lon_max=self.area_lon_max,
            ),
            reference=Point(lat=self.area_reference_lat, lon=self.area_reference_lon),
            radius_deg=self.area_radius_deg,
        )

    @field_validator("supabase_url", "usgs_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Module-level singleton; import this everywhere
# ---------------------------------------------------------------------------
settings = Settings()
