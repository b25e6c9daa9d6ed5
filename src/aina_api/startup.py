"""Static-source checks run before the API starts serving."""

from __future__ import annotations

import structlog

from aina_shared.config import settings

from aina_api.sources.base import SchemaDriftError, SourceNotFoundError, StaticSource
from aina_api.sources.geojson import GnisSource, TsunamiZoneSource
from aina_api.sources.tabular import SoilComponentSource

log = structlog.get_logger(__name__)


def configured_sources() -> list[StaticSource]:
    return [
        GnisSource(settings.gnis_geojson_path),
        TsunamiZoneSource(settings.tsunami_geojson_path),
        SoilComponentSource(settings.soil_component_path),
    ]


def check_static_sources(
    sources: list[StaticSource] | None = None,
) -> dict[str, str]:
    """
    Check every static source once.

    Missing files are reported and logged but tolerated (their routes
    answer 404). Schema drift is raised: the column map no longer
    describes the file and every soil response would be wrong.

    Returns:
        {source name: "ok" | "missing" | "invalid: <reason>"}
    """
    report: dict[str, str] = {}
    for source in sources if sources is not None else configured_sources():
        try:
            source.check()
        except SourceNotFoundError:
            log.warning("static_source_missing", source=source.name, path=str(source.path))
            report[source.name] = "missing"
        except SchemaDriftError as exc:
            log.error("static_source_schema_drift", source=source.name, error=str(exc))
            raise
        except Exception as exc:
            log.error("static_source_invalid", source=source.name, error=str(exc))
            report[source.name] = f"invalid: {exc}"
        else:
            report[source.name] = "ok"
    return report
