from __future__ import annotations

from .client import (
    GITHUB_API_BASE,
    GitHubError,
    GitHubProvider,
    RateLimitError,
    UpstreamError,
    UserNotFoundError,
)

__all__ = [
    "GITHUB_API_BASE",
    "GitHubError",
    "GitHubProvider",
    "RateLimitError",
    "UpstreamError",
    "UserNotFoundError",
]
