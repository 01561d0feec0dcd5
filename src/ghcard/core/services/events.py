from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from ghcard.core.models import ActivityEvent, EventAnalysis

UNKNOWN_REPO = "unknown"
TOP_REPOS_LIMIT = 5


def _longest_streak(days: Iterable[str]) -> int:
    ordered = sorted(days)
    if not ordered:
        return 0
    current = longest = 1
    for prev, curr in zip(ordered, ordered[1:]):
        gap = (date.fromisoformat(curr) - date.fromisoformat(prev)).days
        if gap == 1:
            current += 1
        else:
            longest = max(longest, current)
            current = 1
    return max(longest, current)


def analyze_events(events: Iterable[ActivityEvent]) -> EventAnalysis:
    """Aggregate a list of public events into counts, streak and peak hour.

    Events without a usable timestamp are still counted per kind and per
    repository but do not contribute to the daily or hourly tallies.
    """
    event_counts: dict[str, int] = defaultdict(int)
    repo_counts: dict[str, int] = defaultdict(int)
    first_seen: dict[str, int] = {}
    daily: dict[str, int] = defaultdict(int)
    hourly = [0] * 24
    total = 0

    for ev in events:
        total += 1
        event_counts[ev.type] += 1

        repo = ev.repo_name or UNKNOWN_REPO
        first_seen.setdefault(repo, len(first_seen))
        repo_counts[repo] += 1

        if ev.created_at is not None:
            daily[ev.created_at.date().isoformat()] += 1
            hourly[ev.created_at.hour] += 1

    peak_hour = hourly.index(max(hourly)) if any(hourly) else None

    ranked = sorted(repo_counts.items(), key=lambda kv: (-kv[1], first_seen[kv[0]]))
    top = ranked[:TOP_REPOS_LIMIT]

    return EventAnalysis(
        event_counts=dict(event_counts),
        top_repositories=top,
        peak_hour=peak_hour,
        activity_streak=_longest_streak(daily.keys()),
        total_events=total,
        most_active_repo=top[0][0] if top else None,
        daily_activity=dict(daily),
    )
