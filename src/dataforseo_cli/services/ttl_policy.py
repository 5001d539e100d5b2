"""Freshness rule shared by cache reads, save-time pruning and listings."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from dataforseo_cli.services.cache_models import CacheEntry
from dataforseo_cli.shared.constants import Cache

Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class TTLPolicy:
    """An entry is fresh while its age is strictly below ``ttl_ms``."""

    ttl_ms: int = Cache.TTL_MS

    @classmethod
    def from_seconds(cls, ttl_seconds: int) -> TTLPolicy:
        return cls(ttl_ms=ttl_seconds * 1000)

    def is_fresh(self, entry: CacheEntry, now: int) -> bool:
        return now - entry.ts < self.ttl_ms

    def age_days(self, entry: CacheEntry, now: int) -> int:
        """Whole days elapsed since the entry was stored."""
        return (now - entry.ts) // Cache.DAY_MS
