"""
cli.py — Click CLI entrypoint.

Usage:
    aina-dashboard serve --port 8000
    aina-dashboard check-sources
"""

from __future__ import annotations

import sys

import click
import structlog

from aina_shared.config import settings

from aina_api.sources.base import SchemaDriftError
from aina_api.utils.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level",
)
def main(log_level: str) -> None:
    """Waimanalo public-information dashboard API."""
    configure_logging(log_level=log_level)


@main.command()
@click.option("--host", default=settings.api_host, show_default=True)
@click.option("--port", default=settings.api_port, type=int, show_default=True)
@click.option("--reload", is_flag=True, help="Reload on code changes (development)")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    log.info("server_start", host=host, port=port)
    uvicorn.run("aina_api.app:app", host=host, port=port, reload=reload)


@main.command("check-sources")
def check_sources() -> None:
    """Verify the static data files are present and match their schemas."""
    from aina_api.startup import check_static_sources

    click.echo(f"Data directory: {settings.data_dir}")
    try:
        report = check_static_sources()
    except SchemaDriftError as exc:
        click.echo(f"  SCHEMA DRIFT  {exc}", err=True)
        sys.exit(2)

    for name, status in report.items():
        click.echo(f"  {name:<18} {status}")
    if any(status != "ok" for status in report.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
