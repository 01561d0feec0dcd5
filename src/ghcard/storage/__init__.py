from __future__ import annotations

from .base import CacheEntry, SummaryCache, open_cache
from .memory import MemoryCache

__all__ = ["CacheEntry", "MemoryCache", "SummaryCache", "open_cache"]
