from __future__ import annotations

from typing import Iterable, Optional

from ghcard.core.models import (
    ActivityEvent,
    ActivitySummary,
    ContributionStats,
    EventAnalysis,
    EventKind,
    NotablePattern,
    PatternKind,
    Profile,
    RecentProject,
    SummaryStats,
)

STREAK_NOTABLE_DAYS = 7
STREAK_EXCEPTIONAL_DAYS = 30
RECENT_PROJECTS_LIMIT = 5
LANGUAGES_LIMIT = 5

# (start hour inclusive, end hour exclusive, description)
SCHEDULE_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (0, 6, "a night owl, most active in the early morning hours"),
    (6, 12, "an early bird, most productive in the morning"),
    (12, 18, "most active during afternoon hours"),
    (18, 24, "an evening coder, most active in the late hours"),
)


def _short_name(full_name: str) -> str:
    parts = full_name.split("/", 1)
    return parts[1] if len(parts) == 2 and parts[1] else full_name


def _ranked_languages(stats: ContributionStats) -> list[tuple[str, int]]:
    return sorted(stats.languages.items(), key=lambda kv: -kv[1])


def _primary_language(stats: ContributionStats) -> Optional[str]:
    ranked = _ranked_languages(stats)
    return ranked[0][0] if ranked else None


def schedule_description(peak_hour: int) -> str:
    for start, end, text in SCHEDULE_BUCKETS:
        if start <= peak_hour < end:
            return text
    raise ValueError(f"peak hour out of range: {peak_hour}")


def _patterns(analysis: EventAnalysis) -> list[NotablePattern]:
    patterns: list[NotablePattern] = []
    streak = analysis.activity_streak
    if streak >= STREAK_NOTABLE_DAYS:
        patterns.append(
            NotablePattern(
                kind=PatternKind.streak,
                severity="exceptional" if streak >= STREAK_EXCEPTIONAL_DAYS else "notable",
                description=f"{streak}-day activity streak",
            )
        )
    if analysis.peak_hour is not None:
        patterns.append(
            NotablePattern(
                kind=PatternKind.schedule,
                description=schedule_description(analysis.peak_hour),
            )
        )
    return patterns


def _project_detail(ev: ActivityEvent) -> Optional[str]:
    kind = ev.kind
    payload = ev.payload
    if kind is EventKind.push and payload.commits is not None:
        n = len(payload.commits)
        return f"{n} commit{'' if n == 1 else 's'}"
    if kind is EventKind.pull_request and payload.pull_request_title:
        return payload.pull_request_title
    if kind is EventKind.issue and payload.issue_title:
        return payload.issue_title
    if kind is EventKind.create and payload.ref_type:
        return f"Created {payload.ref_type}"
    return None


def extract_recent_projects(events: Iterable[ActivityEvent]) -> list[RecentProject]:
    """One project per repository, in event order, first event wins."""
    projects: dict[str, RecentProject] = {}
    for ev in events:
        if len(projects) >= RECENT_PROJECTS_LIMIT:
            break
        if not ev.repo_name or ev.repo_name in projects:
            continue
        projects[ev.repo_name] = RecentProject(
            name=_short_name(ev.repo_name),
            full_name=ev.repo_name,
            activity_type=ev.description,
            last_active=ev.created_at,
            detail=_project_detail(ev),
        )
    return list(projects.values())


def _narrative(
    name: str,
    primary_language: Optional[str],
    patterns: list[NotablePattern],
    achievements: list[str],
    projects: list[RecentProject],
    stats: ContributionStats,
) -> str:
    lines: list[str] = []
    if primary_language:
        lines.append(f"{name} is a developer who primarily works with {primary_language}.")
    else:
        lines.append(f"{name} is an active developer on GitHub.")

    by_kind = {p.kind: p for p in patterns}
    schedule = by_kind.get(PatternKind.schedule)
    if schedule:
        lines.append(f"They are {schedule.description}.")

    streak = by_kind.get(PatternKind.streak)
    if streak:
        if streak.severity == "exceptional":
            lines.append(f"Impressively, they've maintained a {streak.description}!")
        else:
            lines.append(f"They've been on a {streak.description}.")

    if projects:
        lines.append(f"Recently active on: {', '.join(p.name for p in projects[:3])}.")

    if achievements:
        lines.append(f"Notable: {', '.join(achievements)}.")

    stat_parts: list[str] = []
    if stats.total_repos > 0:
        stat_parts.append(f"{stats.total_repos} repositories")
    if stats.total_stars > 0:
        stat_parts.append(f"{stats.total_stars} stars earned")
    if stat_parts:
        lines.append(f"Stats: {', '.join(stat_parts)}.")

    return " ".join(lines)


def generate_activity_summary(
    profile: Profile,
    analysis: EventAnalysis,
    stats: ContributionStats,
    events: Iterable[ActivityEvent],
) -> ActivitySummary:
    """Turn raw analysis into patterns, badges and a narrative paragraph."""
    patterns = _patterns(analysis)
    achievements: list[str] = []
    highlights: list[str] = []

    if analysis.most_active_repo:
        highlights.append(f'Heavily focused on "{_short_name(analysis.most_active_repo)}"')

    counts = analysis.event_counts
    total = analysis.total_events
    pushes = counts.get(EventKind.push.value, 0)
    if total and pushes / total > 0.5:
        highlights.append("Primarily focused on pushing code")

    if counts.get(EventKind.review.value, 0) > 5:
        highlights.append("Active code reviewer")
        achievements.append("Code Review Champion")

    if counts.get(EventKind.issue.value, 0) > 10:
        highlights.append("Active issue tracker")

    if stats.total_stars >= 100:
        achievements.append(f"Earned {stats.total_stars} stars")

    if stats.total_repos >= 50:
        achievements.append("Prolific creator with 50+ repositories")

    if len(stats.languages) >= 5:
        achievements.append(f"Polyglot developer using {len(stats.languages)} languages")

    ranked = _ranked_languages(stats)
    primary = ranked[0][0] if ranked else None
    projects = extract_recent_projects(events)

    return ActivitySummary(
        username=profile.login,
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
        profile_url=profile.html_url,
        primary_language=primary,
        languages=[lang for lang, _ in ranked[:LANGUAGES_LIMIT]],
        language_sizes=ranked[:LANGUAGES_LIMIT],
        notable_patterns=patterns,
        achievements=achievements,
        activity_highlights=highlights,
        recent_projects=projects,
        summary=_narrative(profile.display_name, primary, patterns, achievements, projects, stats),
        stats=SummaryStats(
            total_events=total,
            total_repos=stats.total_repos,
            total_stars=stats.total_stars,
            activity_streak=analysis.activity_streak,
        ),
    )


def generate_short_summary(profile: Profile, analysis: EventAnalysis, stats: ContributionStats) -> str:
    name = profile.display_name
    language = _primary_language(stats)
    if language and analysis.activity_streak >= STREAK_NOTABLE_DAYS:
        return f"{name}: {language} developer on a {analysis.activity_streak}-day streak"
    if language:
        return f"{name}: Active {language} developer"
    return f"{name}: Active GitHub contributor"
