"""In-memory TTL cache with an injectable clock."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class TTLCache:
    """
    Dict-based cache where every entry lives for a fixed TTL.

    Entries are (value, inserted_at). A read at or after
    inserted_at + ttl treats the entry as stale and drops it. There is no
    background eviction and no locking: concurrent refreshes may both
    recompute, and the last `set` wins.
    """

    def __init__(
        self,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store: dict[str, tuple[Any, float]] = {}
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, inserted_at = entry
        if self._clock() - inserted_at >= self._ttl:
            self._store.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (value, self._clock())

    def __len__(self) -> int:
        return len(self._store)
