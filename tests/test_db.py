"""Tests for the Supabase client registry."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aina_shared import db
from aina_shared.config import settings


@pytest.fixture(autouse=True)
def _fresh_clients(monkeypatch):
    monkeypatch.setattr(settings, "supabase_anon_key", "anon-key")
    monkeypatch.setattr(settings, "supabase_service_key", "service-key")
    db.reset_supabase_clients()
    yield
    db.reset_supabase_clients()


def test_one_client_per_role():
    with patch("aina_shared.db.create_client", side_effect=lambda url, key: (url, key)) as create:
        anon = db.get_supabase_client()
        service = db.get_supabase_client(service_role=True)
        assert db.get_supabase_client() is anon

    assert anon == (settings.supabase_url, "anon-key")
    assert service == (settings.supabase_url, "service-key")
    assert create.call_count == 2


def test_reset_rebuilds_clients():
    with patch("aina_shared.db.create_client", side_effect=lambda url, key: object()) as create:
        first = db.get_supabase_client()
        db.reset_supabase_clients()
        assert db.get_supabase_client() is not first
    assert create.call_count == 2


def test_missing_service_key(monkeypatch):
    monkeypatch.setattr(settings, "supabase_service_key", "")
    with pytest.raises(RuntimeError, match="SUPABASE_SERVICE_KEY"):
        db.get_supabase_client(service_role=True)
