"""Tests for the command-line interface."""

from __future__ import annotations

from unittest.mock import patch

from click.testing import CliRunner

from aina_api.cli import main
from tests.conftest import comp_header, comp_line, write_comp_file


def test_check_sources_ok(data_dir):
    result = CliRunner().invoke(main, ["check-sources"])
    assert result.exit_code == 0
    assert "SSURGOComponent" in result.output
    assert "missing" not in result.output


def test_check_sources_missing_exits_1(data_dir):
    (data_dir / "gnis.geojson").unlink()
    result = CliRunner().invoke(main, ["check-sources"])
    assert result.exit_code == 1
    assert "missing" in result.output


def test_check_sources_drift_exits_2(data_dir):
    write_comp_file(
        data_dir / "tabular" / "comp.txt",
        [comp_line(compname="Pohakupu")],
        header=comp_header({20: "drainage"}),
    )
    result = CliRunner().invoke(main, ["check-sources"])
    assert result.exit_code == 2


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as run:
        result = CliRunner().invoke(main, ["serve", "--port", "9001"])
    assert result.exit_code == 0
    run.assert_called_once_with("aina_api.app:app", host="0.0.0.0", port=9001, reload=False)
