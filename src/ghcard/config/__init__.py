"""Configuration helpers.

Prefer environment variables for secrets and tokens.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CACHE_TTL_SECONDS = 4 * 60 * 60
DEFAULT_CACHE_MAX_ENTRIES = 1000
DEFAULT_CACHE_DSN = "memory://"


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip().lstrip("-").isdigit():
        return default
    return int(val)


@dataclass
class Settings:
    github_token: Optional[str] = None
    variant: str = "dev"  # 'dev' | 'hosted'
    host: str = "127.0.0.1"
    port: int = 3000
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    cache_max_entries: int = DEFAULT_CACHE_MAX_ENTRIES
    cache_dsn: str = DEFAULT_CACHE_DSN


def load_settings() -> Settings:
    return Settings(
        github_token=env_str("GITHUB_TOKEN") or env_str("GH_TOKEN") or None,
        variant=(env_str("GHCARD_VARIANT", "dev") or "dev").lower(),
        host=env_str("HOST", "127.0.0.1") or "127.0.0.1",
        port=env_int("PORT", 3000),
        cache_ttl_seconds=env_int("GHCARD_CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS),
        cache_max_entries=env_int("GHCARD_CACHE_MAX_ENTRIES", DEFAULT_CACHE_MAX_ENTRIES),
        cache_dsn=env_str("GHCARD_CACHE_DSN", DEFAULT_CACHE_DSN) or DEFAULT_CACHE_DSN,
    )
