from __future__ import annotations

import asyncio
from typing import Any, Optional, cast

import httpx

from ghcard.core.models import ActivityEvent, Profile, Repository
from ghcard.metrics import record
from ghcard.utils import get_logger, http_async_client

GITHUB_API_BASE = "https://api.github.com"
PER_PAGE = 100

log = get_logger()


class GitHubError(RuntimeError):
    """Any failure talking to the GitHub API."""


class UserNotFoundError(GitHubError):
    def __init__(self, login: str) -> None:
        super().__init__(f'User "{login}" not found')
        self.login = login


class RateLimitError(GitHubError):
    def __init__(self) -> None:
        super().__init__("GitHub API rate limit exceeded. Please try again later or provide a token.")


class UpstreamError(GitHubError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubProvider:
    id = "github"

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = GITHUB_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.base_url = base_url
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return http_async_client(self.base_url, token=self.token, transport=self.transport)

    async def _get(
        self, op: str, path: str, login: Optional[str] = None, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        async with self._client() as client:
            with record(f"github.{op}"):
                try:
                    resp = await client.get(path, params=params)
                except httpx.HTTPError as e:
                    log.warning("github.request_failed", op=op, path=path, error=str(e))
                    raise UpstreamError(f"GitHub request failed: {e}") from e
        log.info("github.fetch", op=op, path=path, status=resp.status_code)
        if resp.status_code == 404:
            if login:
                raise UserNotFoundError(login)
            raise UpstreamError(f"GitHub resource not found: {path}", 404)
        if resp.status_code in (403, 429):
            raise RateLimitError()
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"GitHub API error: HTTP {resp.status_code}", resp.status_code) from e
        return resp

    async def fetch_user_profile(self, login: str) -> Profile:
        resp = await self._get("profile", f"/users/{login}", login=login)
        return Profile.model_validate(resp.json())

    async def fetch_user_events(self, login: str, per_page: int = PER_PAGE) -> list[ActivityEvent]:
        resp = await self._get(
            "events", f"/users/{login}/events/public", login=login, params={"per_page": min(per_page, PER_PAGE)}
        )
        data = cast(list[dict[str, Any]], resp.json() or [])
        return [ActivityEvent.from_api(item) for item in data]

    async def fetch_user_repos(self, login: str, sort: str = "pushed", per_page: int = PER_PAGE) -> list[Repository]:
        resp = await self._get(
            "repos",
            f"/users/{login}/repos",
            login=login,
            params={"sort": sort, "per_page": min(per_page, PER_PAGE), "type": "owner"},
        )
        data = cast(list[dict[str, Any]], resp.json() or [])
        return [Repository.model_validate(item) for item in data]

    async def fetch_repo_commit_activity(self, repo: str) -> list[dict[str, Any]]:
        """Weekly commit activity; empty while GitHub is still computing it."""
        owner, name = repo.split("/", 1)
        resp = await self._get("commit_activity", f"/repos/{owner}/{name}/stats/commit_activity")
        if resp.status_code == 202:
            return []
        return cast(list[dict[str, Any]], resp.json() or [])

    async def fetch_user_activity(self, login: str) -> tuple[Profile, list[ActivityEvent], list[Repository]]:
        profile, events, repos = await asyncio.gather(
            self.fetch_user_profile(login),
            self.fetch_user_events(login),
            self.fetch_user_repos(login),
        )
        return profile, events, repos
