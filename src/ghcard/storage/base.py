from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ghcard.core.models import ActivitySummary


@dataclass(frozen=True)
class CacheEntry:
    summary: ActivitySummary
    fetched_at_ms: int


class SummaryCache(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[ActivitySummary]:
        """Return the cached summary if it is still fresh."""

    @abstractmethod
    def set(self, key: str, summary: ActivitySummary) -> None:
        ...

    @abstractmethod
    def evict(self) -> int:
        """Drop entries beyond capacity; return how many were removed."""


def open_cache(
    dsn: str, ttl_seconds: Optional[int] = None, max_entries: Optional[int] = None
) -> SummaryCache:
    """Open a summary cache based on DSN.

    Examples:
    - memory://
    """
    if dsn.startswith("memory://"):
        from .memory import MemoryCache

        kwargs: dict[str, int] = {}
        if ttl_seconds is not None:
            kwargs["ttl_seconds"] = ttl_seconds
        return MemoryCache(max_entries=max_entries, **kwargs)
    raise ValueError(f"Unsupported cache DSN: {dsn}")
