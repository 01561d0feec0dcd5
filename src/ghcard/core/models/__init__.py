from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from dateutil import parser as dateutil_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventKind(str, Enum):
    push = "PushEvent"
    pull_request = "PullRequestEvent"
    issue = "IssuesEvent"
    create = "CreateEvent"
    delete = "DeleteEvent"
    watch = "WatchEvent"
    fork = "ForkEvent"
    issue_comment = "IssueCommentEvent"
    review = "PullRequestReviewEvent"
    review_comment = "PullRequestReviewCommentEvent"
    commit_comment = "CommitCommentEvent"
    release = "ReleaseEvent"
    publicize = "PublicEvent"
    member_add = "MemberEvent"
    wiki_update = "GollumEvent"


EVENT_DESCRIPTIONS: dict[EventKind, str] = {
    EventKind.push: "code commits",
    EventKind.pull_request: "pull requests",
    EventKind.issue: "issues",
    EventKind.create: "repository/branch creations",
    EventKind.delete: "branch deletions",
    EventKind.watch: "repository stars",
    EventKind.fork: "repository forks",
    EventKind.issue_comment: "issue comments",
    EventKind.review: "code reviews",
    EventKind.review_comment: "review comments",
    EventKind.commit_comment: "commit comments",
    EventKind.release: "releases",
    EventKind.publicize: "repository publications",
    EventKind.member_add: "collaborator additions",
    EventKind.wiki_update: "wiki updates",
}


def _parse_optional_dt(val: Any) -> Optional[datetime]:
    if val is None or isinstance(val, datetime):
        return val
    try:
        return dateutil_parser.isoparse(str(val))
    except (ValueError, OverflowError):
        return None


class EventPayload(BaseModel):
    """The handful of payload fields the summary cares about."""

    model_config = ConfigDict(frozen=True)

    commits: Optional[list[dict[str, Any]]] = None
    pull_request_title: Optional[str] = None
    issue_title: Optional[str] = None
    ref_type: Optional[str] = None


class ActivityEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    repo_name: Optional[str] = None
    created_at: Optional[datetime] = None
    payload: EventPayload = Field(default_factory=EventPayload)

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, val: Any) -> Optional[datetime]:
        return _parse_optional_dt(val)

    @property
    def kind(self) -> Optional[EventKind]:
        try:
            return EventKind(self.type)
        except ValueError:
            return None

    @property
    def description(self) -> str:
        kind = self.kind
        return EVENT_DESCRIPTIONS[kind] if kind is not None else self.type

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ActivityEvent":
        """Build from one item of the GitHub public events API."""
        raw_payload = data.get("payload") or {}
        pull_request = raw_payload.get("pull_request") or {}
        issue = raw_payload.get("issue") or {}
        commits = raw_payload.get("commits")
        return cls(
            type=str(data.get("type") or "UnknownEvent"),
            repo_name=(data.get("repo") or {}).get("name") or None,
            created_at=data.get("created_at"),
            payload=EventPayload(
                commits=commits if isinstance(commits, list) else None,
                pull_request_title=pull_request.get("title"),
                issue_title=issue.get("title"),
                ref_type=raw_payload.get("ref_type"),
            ),
        )


class Repository(BaseModel):
    name: str
    full_name: str
    language: Optional[str] = None
    size: int = 0
    stargazers_count: int = 0
    forks_count: int = 0
    description: Optional[str] = None
    html_url: Optional[str] = None
    pushed_at: Optional[datetime] = None

    @field_validator("pushed_at", mode="before")
    @classmethod
    def parse_pushed_at(cls, val: Any) -> Optional[datetime]:
        return _parse_optional_dt(val)


class Profile(BaseModel):
    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    public_repos: int = 0
    followers: int = 0

    @property
    def display_name(self) -> str:
        return self.name or self.login


class EventAnalysis(BaseModel):
    event_counts: dict[str, int] = Field(default_factory=dict)
    top_repositories: list[tuple[str, int]] = Field(default_factory=list)
    # None when no event carried a usable timestamp
    peak_hour: Optional[int] = None
    activity_streak: int = 0
    total_events: int = 0
    most_active_repo: Optional[str] = None
    daily_activity: dict[str, int] = Field(default_factory=dict)


class ContributionStats(BaseModel):
    total_stars: int = 0
    total_forks: int = 0
    total_repos: int = 0
    languages: dict[str, int] = Field(default_factory=dict)
    recent_repos: list[Repository] = Field(default_factory=list)


class PatternKind(str, Enum):
    streak = "streak"
    schedule = "schedule"


class NotablePattern(BaseModel):
    kind: PatternKind
    description: str
    severity: Optional[str] = None


class RecentProject(BaseModel):
    name: str
    full_name: str
    activity_type: str
    last_active: Optional[datetime] = None
    detail: Optional[str] = None


class SummaryStats(BaseModel):
    total_events: int = 0
    total_repos: int = 0
    total_stars: int = 0
    activity_streak: int = 0


class ActivitySummary(BaseModel):
    username: str
    display_name: str
    avatar_url: Optional[str] = None
    profile_url: Optional[str] = None
    primary_language: Optional[str] = None
    languages: list[str] = Field(default_factory=list)
    language_sizes: list[tuple[str, int]] = Field(default_factory=list)
    notable_patterns: list[NotablePattern] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    activity_highlights: list[str] = Field(default_factory=list)
    recent_projects: list[RecentProject] = Field(default_factory=list)
    summary: str = ""
    stats: SummaryStats = Field(default_factory=SummaryStats)

    def pattern(self, kind: PatternKind) -> Optional[NotablePattern]:
        return next((p for p in self.notable_patterns if p.kind == kind), None)
