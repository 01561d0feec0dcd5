from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ghcard.config import DEFAULT_CACHE_TTL_SECONDS
from ghcard.core.models import ActivitySummary

from .base import CacheEntry, SummaryCache


@dataclass
class MemoryCache(SummaryCache):
    """Process-local summary cache with a fixed freshness window.

    Entries older than ``ttl_seconds`` are treated as misses. When
    ``max_entries`` is set, the oldest inserted entries are dropped once
    the cache grows past it.
    """

    ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    max_entries: Optional[int] = None
    clock: Callable[[], float] = time.time
    entries: dict[str, CacheEntry] = field(default_factory=dict)

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def get(self, key: str) -> Optional[ActivitySummary]:
        entry = self.entries.get(key)
        if entry is None:
            return None
        if self._now_ms() - entry.fetched_at_ms >= self.ttl_seconds * 1000:
            return None
        return entry.summary

    def set(self, key: str, summary: ActivitySummary) -> None:
        # re-insert so a refreshed key counts as the newest
        self.entries.pop(key, None)
        self.entries[key] = CacheEntry(summary=summary, fetched_at_ms=self._now_ms())
        self.evict()

    def evict(self) -> int:
        if self.max_entries is None:
            return 0
        removed = 0
        while len(self.entries) > self.max_entries:
            del self.entries[next(iter(self.entries))]
            removed += 1
        return removed

    def __len__(self) -> int:
        return len(self.entries)
