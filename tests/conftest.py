"""Shared test fixtures for aina-dashboard."""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from aina_api.sources.tabular import SOIL_COMPONENT_COLUMNS
from aina_api.utils.cache import TTLCache

FIXTURES_DIR = Path(__file__).parent / "fixtures"

COMP_COLUMN_COUNT = 90
_CHAIN_METHODS = (
    "select", "eq", "neq", "gt", "gte", "lt", "lte",
    "in_", "ilike", "order", "limit", "range",
)


# ---------------------------------------------------------------------------
# Supabase client mock
# ---------------------------------------------------------------------------

def make_chain(data=None, count=0):
    """Create a chainable mock that returns given data on execute()."""
    chain = MagicMock()
    chain.execute.return_value = MagicMock(data=data or [], count=count)
    for method in _CHAIN_METHODS:
        getattr(chain, method).return_value = chain
    return chain


def make_supabase(table_data=None, rpc_data=None):
    """Create a mock Supabase client.

    table_data: optional dict mapping table name -> (data, count).
    rpc_data:   optional dict mapping function name -> rows.
    Unmapped tables and functions return empty results.
    """
    client = MagicMock()
    td = table_data or {}
    rd = rpc_data or {}

    def _table(name):
        data, count = td.get(name, ([], 0))
        chain = make_chain(data, count)
        table = MagicMock()
        for method in _CHAIN_METHODS:
            getattr(table, method).return_value = chain
        return table

    def _rpc(name, params=None):
        return make_chain(rd.get(name, []))

    client.table.side_effect = _table
    client.rpc.side_effect = _rpc
    return client


# ---------------------------------------------------------------------------
# Static data files
# ---------------------------------------------------------------------------

def comp_header(overrides: dict[int, str] | None = None) -> list[str]:
    header = [f"col{i}" for i in range(COMP_COLUMN_COUNT)]
    for idx, name in SOIL_COMPONENT_COLUMNS.items():
        header[idx] = name
    for idx, name in (overrides or {}).items():
        header[idx] = name
    return header


def comp_line(**fields: str) -> str:
    """One comp.txt row; keyword names are the mapped column names."""
    values = [""] * COMP_COLUMN_COUNT
    by_name = {name: idx for idx, name in SOIL_COMPONENT_COLUMNS.items()}
    for name, value in fields.items():
        values[by_name[name]] = f'"{value}"'
    return "|".join(values)


def write_comp_file(path: Path, lines: list[str], header: list[str] | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    content = "|".join(header or comp_header()) + "\n" + "\n".join(lines) + "\n"
    path.write_text(content, encoding="utf-8")
    return path


DEFAULT_COMP_LINES = [
    comp_line(compname="Alaeloa", drainagecl="Well drained"),
    comp_line(
        compname="Pohakupu",
        slope_l="3",
        slope_h="8",
        resdept_r="152",
        erocl="Slight",
        om_r="2.5",
        ph1to1h2o_r="6.1",
        drainagecl="Well drained",
        hydgrp="B",
        taxorder="Inceptisols",
        taxsuborder="Ustepts",
        taxgrtgroup="Haplustepts",
        taxsubgrp="Typic Haplustepts",
        texture="Silty clay loam",
    ),
    comp_line(compname="Lolekaa", drainagecl="Moderately well drained"),
]


@pytest.fixture
def fixture_path() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A data directory with every static source, wired into settings."""
    from aina_shared.config import settings

    shutil.copy(FIXTURES_DIR / "gnis_sample.geojson", tmp_path / "gnis.geojson")
    shutil.copy(FIXTURES_DIR / "tsunami_sample.geojson", tmp_path / "tsunami.geojson")
    write_comp_file(tmp_path / "tabular" / "comp.txt", DEFAULT_COMP_LINES)

    monkeypatch.setattr(settings, "data_dir", tmp_path)
    monkeypatch.setattr(settings, "gnis_geojson_file", "gnis.geojson")
    monkeypatch.setattr(settings, "tsunami_geojson_file", "tsunami.geojson")
    monkeypatch.setattr(settings, "soil_component_file", "tabular/comp.txt")
    return tmp_path


# ---------------------------------------------------------------------------
# App / client
# ---------------------------------------------------------------------------

class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def metrics_cache(clock: FakeClock) -> TTLCache:
    return TTLCache(ttl=300, clock=clock)


@pytest.fixture()
def _supabase_patch():
    """Patch get_supabase_client everywhere it's imported."""
    mock = make_supabase()
    patches = [
        patch("aina_shared.db.get_supabase_client", return_value=mock),
        patch("aina_api.middleware.auth.get_supabase_client", return_value=mock),
        patch("aina_api.services.metrics_service.get_supabase_client", return_value=mock),
    ]
    for p in patches:
        p.start()
    yield mock
    for p in patches:
        p.stop()


@pytest.fixture()
def app(_supabase_patch, metrics_cache):
    """Create test FastAPI app with mocked Supabase and a fake-clock cache."""
    from aina_api.app import create_app
    return create_app(metrics_cache=metrics_cache)


@pytest.fixture()
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture()
def waimanalo() -> dict[str, str]:
    return {"lat": "21.33861", "lon": "-157.70005"}
