from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ghcard.core.models import (
    ActivityEvent,
    ActivitySummary,
    ContributionStats,
    EventAnalysis,
    Profile,
)
from ghcard.core.services.contributions import aggregate_contributions
from ghcard.core.services.events import analyze_events
from ghcard.core.services.summary import generate_activity_summary, generate_short_summary
from ghcard.providers.github import GitHubProvider
from ghcard.storage.base import SummaryCache
from ghcard.utils import get_logger, utcnow_iso

log = get_logger()


@dataclass
class ActivityData:
    profile: Profile
    events: list[ActivityEvent]
    event_analysis: EventAnalysis
    contribution_stats: ContributionStats
    fetched_at: str

    def summarize(self) -> ActivitySummary:
        return generate_activity_summary(
            self.profile, self.event_analysis, self.contribution_stats, self.events
        )

    def short_summary(self) -> str:
        return generate_short_summary(self.profile, self.event_analysis, self.contribution_stats)


async def fetch_activity_data(login: str, provider: GitHubProvider) -> ActivityData:
    """Fetch profile, events and repos concurrently, then analyze them."""
    profile, events, repos = await provider.fetch_user_activity(login)
    return ActivityData(
        profile=profile,
        events=events,
        event_analysis=analyze_events(events),
        contribution_stats=aggregate_contributions(repos),
        fetched_at=utcnow_iso(),
    )


def cache_key(login: str) -> str:
    return f"user:{login}"


async def summarize_github_user(
    login: str,
    provider: GitHubProvider,
    cache: Optional[SummaryCache] = None,
) -> ActivitySummary:
    """End-to-end: cache lookup -> fetch -> analyze -> summarize -> cache store."""
    key = cache_key(login)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            log.info("summary.cache_hit", login=login)
            return cached
        log.info("summary.cache_miss", login=login)
    data = await fetch_activity_data(login, provider)
    summary = data.summarize()
    if cache is not None:
        cache.set(key, summary)
    return summary
