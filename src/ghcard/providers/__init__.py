from __future__ import annotations

from typing import Optional

from .github import GitHubProvider


def get_provider(name: str, token: Optional[str] = None) -> GitHubProvider:
    if name == "github":
        return GitHubProvider(token=token)
    raise ValueError(f"Unknown provider: {name}")

__all__ = ["get_provider"]
