from __future__ import annotations

from typing import Any, Callable, Optional

import httpx
import pytest

from ghcard.core.models import (
    ActivityEvent,
    ActivitySummary,
    NotablePattern,
    PatternKind,
    RecentProject,
    SummaryStats,
)
from ghcard.providers.github import GitHubProvider


def make_event(
    type: str = "PushEvent",
    repo: Optional[str] = "user/repo",
    at: Optional[str] = "2024-01-15T10:00:00Z",
    payload: Optional[dict[str, Any]] = None,
) -> ActivityEvent:
    data: dict[str, Any] = {"type": type, "created_at": at, "payload": payload or {}}
    if repo is not None:
        data["repo"] = {"name": repo}
    return ActivityEvent.from_api(data)


@pytest.fixture
def summary() -> ActivitySummary:
    return ActivitySummary(
        username="testuser",
        display_name="Test User",
        summary=(
            "Test User is a developer who primarily works with JavaScript. "
            "They are an early bird, most productive in the morning."
        ),
        primary_language="JavaScript",
        languages=["JavaScript", "Python", "TypeScript"],
        language_sizes=[("JavaScript", 5000), ("Python", 3000), ("TypeScript", 2000)],
        recent_projects=[
            RecentProject(name="project1", full_name="testuser/project1", activity_type="code commits", detail="Initial commit"),
            RecentProject(name="project2", full_name="testuser/project2", activity_type="pull requests", detail="Add new feature"),
        ],
        achievements=["Code Review Champion"],
        notable_patterns=[
            NotablePattern(kind=PatternKind.streak, description="7-day activity streak", severity="notable"),
            NotablePattern(kind=PatternKind.schedule, description="an early bird, most productive in the morning"),
        ],
        stats=SummaryStats(total_events=25, total_repos=15, total_stars=50, activity_streak=7),
    )


PROFILE = {
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.example/octocat.png",
    "html_url": "https://github.com/octocat",
}

EVENTS = [
    {
        "type": "PushEvent",
        "created_at": "2024-01-16T10:00:00Z",
        "repo": {"name": "octocat/hello-world"},
        "payload": {"commits": [{"message": "a"}, {"message": "b"}]},
    },
    {
        "type": "PullRequestEvent",
        "created_at": "2024-01-15T10:30:00Z",
        "repo": {"name": "octocat/spoon-knife"},
        "payload": {"pull_request": {"title": "Add a fork"}},
    },
]

REPOS = [
    {"name": "hello-world", "full_name": "octocat/hello-world", "language": "Python", "size": 300, "stargazers_count": 80, "forks_count": 3},
    {"name": "spoon-knife", "full_name": "octocat/spoon-knife", "language": "HTML", "size": 100, "stargazers_count": 40, "forks_count": 9},
]


def github_routes(
    profile: Any = PROFILE, events: Any = EVENTS, repos: Any = REPOS, status: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if status != 200:
            return httpx.Response(status, json={"message": "error"})
        path = request.url.path
        if path.endswith("/events/public"):
            return httpx.Response(200, json=events)
        if path.endswith("/repos"):
            return httpx.Response(200, json=repos)
        if path.startswith("/users/"):
            return httpx.Response(200, json=profile)
        return httpx.Response(404, json={"message": "Not Found"})

    return handler


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(github_routes())


@pytest.fixture
def provider(transport: RecordingTransport) -> GitHubProvider:
    return GitHubProvider(token="t0ken", transport=transport)
