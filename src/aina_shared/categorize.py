"""
categorize.py — Partition flat feature lists into named buckets.

Every input item lands in exactly one bucket: the first rule whose class
set contains the item's key, else the residual "other" bucket. Empty
buckets are still present in the output so responses keep a fixed shape.

Usage:
    from aina_shared.categorize import categorize_features, group_zones_by_tier

    buckets = categorize_features(features)
    buckets["streams"]        # [GeographicFeature(feature_class="Stream", ...), ...]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from aina_shared.constants import FEATURE_CLASS_BUCKETS, OTHER_BUCKET, ZONE_TIERS
from aina_shared.models.geography import GeographicFeature

T = TypeVar("T")


def partition(
    items: Iterable[T],
    key: Callable[[T], object],
    rules: Sequence[tuple[str, frozenset]],
    *,
    residual: str = OTHER_BUCKET,
) -> dict[str, list[T]]:
    """Assign each item to the first matching bucket, preserving input order."""
    buckets: dict[str, list[T]] = {name: [] for name, _ in rules}
    buckets[residual] = []
    for item in items:
        value = key(item)
        for name, members in rules:
            if value in members:
                buckets[name].append(item)
                break
        else:
            buckets[residual].append(item)
    return buckets


def categorize_features(
    features: Iterable[GeographicFeature],
) -> dict[str, list[GeographicFeature]]:
    return partition(features, lambda f: f.feature_class, FEATURE_CLASS_BUCKETS)


def group_zones_by_tier(
    zones: Iterable[T],
    code: Callable[[T], object] = lambda z: z.zone_code,
) -> dict[str, list[T]]:
    """Bucket zones by evacuation tier; `code` reads the zone code (models or dicts)."""
    rules = [(tier, frozenset({zone_code})) for zone_code, tier in ZONE_TIERS.items()]
    return partition(zones, code, rules)
