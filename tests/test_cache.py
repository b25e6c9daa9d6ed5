"""Tests for the TTL cache."""

from __future__ import annotations

from aina_api.utils.cache import TTLCache
from tests.conftest import FakeClock


def test_fresh_entry_is_returned():
    clock = FakeClock()
    cache = TTLCache(ttl=300, clock=clock)
    cache.set("k", {"a": 1})
    clock.advance(299.9)
    assert cache.get("k") == {"a": 1}


def test_entry_expires_at_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=300, clock=clock)
    cache.set("k", "v")
    clock.advance(300)
    assert cache.get("k") is None
    assert len(cache) == 0


def test_set_overwrites_and_restarts_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=300, clock=clock)
    cache.set("k", "old")
    clock.advance(200)
    cache.set("k", "new")
    clock.advance(200)
    assert cache.get("k") == "new"


def test_missing_key_and_stale_entry_dropped(clock):
    cache = TTLCache(ttl=10, clock=clock)
    assert cache.get("nope") is None
    cache.set("a", 1)
    assert len(cache) == 1
    clock.advance(10)
    assert cache.get("a") is None
    assert len(cache) == 0


def test_instances_do_not_share_state():
    first, second = TTLCache(), TTLCache()
    first.set("k", 1)
    assert second.get("k") is None
