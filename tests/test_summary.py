from __future__ import annotations

import pytest
from conftest import make_event

from ghcard.core.models import ContributionStats, EventAnalysis, PatternKind, Profile
from ghcard.core.services.summary import (
    extract_recent_projects,
    generate_activity_summary,
    generate_short_summary,
    schedule_description,
)

PROFILE = Profile(login="testuser", name="Test User", html_url="https://github.com/testuser")

EVENTS = [
    make_event("PushEvent", "testuser/project1", "2024-01-15T10:00:00Z", {"commits": [{"message": "Initial commit"}]}),
    make_event("PullRequestEvent", "testuser/project2", "2024-01-14T10:00:00Z", {"pull_request": {"title": "Add new feature"}}),
]


def _analysis(**overrides) -> EventAnalysis:
    base = dict(
        event_counts={"PushEvent": 5, "PullRequestEvent": 2},
        top_repositories=[("testuser/project1", 4), ("testuser/project2", 3)],
        peak_hour=10,
        activity_streak=7,
        total_events=7,
        most_active_repo="testuser/project1",
        daily_activity={"2024-01-15": 3, "2024-01-14": 4},
    )
    base.update(overrides)
    return EventAnalysis(**base)


def _stats(**overrides) -> ContributionStats:
    base = dict(
        total_stars=50,
        total_forks=10,
        total_repos=15,
        languages={"JavaScript": 5000, "Python": 3000, "TypeScript": 2000},
    )
    base.update(overrides)
    return ContributionStats(**base)


def test_identity_and_stats():
    result = generate_activity_summary(PROFILE, _analysis(), _stats(), EVENTS)
    assert result.username == "testuser"
    assert result.display_name == "Test User"
    assert result.profile_url == "https://github.com/testuser"
    assert result.stats.total_repos == 15
    assert result.stats.total_stars == 50
    assert result.stats.activity_streak == 7
    assert result.stats.total_events == 7


def test_display_name_falls_back_to_login():
    result = generate_activity_summary(Profile(login="testuser"), _analysis(), _stats(), EVENTS)
    assert result.display_name == "testuser"
    assert result.summary.startswith("testuser is a developer")


def test_primary_language_and_ordered_languages():
    stats = _stats(languages={"Python": 3000, "JavaScript": 5000, "TypeScript": 2000})
    result = generate_activity_summary(PROFILE, _analysis(), stats, EVENTS)
    assert result.primary_language == "JavaScript"
    assert result.languages == ["JavaScript", "Python", "TypeScript"]
    assert result.language_sizes[0] == ("JavaScript", 5000)


def test_streak_pattern_threshold():
    result = generate_activity_summary(PROFILE, _analysis(), _stats(), EVENTS)
    streak = result.pattern(PatternKind.streak)
    assert streak is not None
    assert "7-day" in streak.description
    assert streak.severity == "notable"

    low = generate_activity_summary(PROFILE, _analysis(activity_streak=2), _stats(), EVENTS)
    assert low.pattern(PatternKind.streak) is None


def test_exceptional_streak_phrasing():
    result = generate_activity_summary(PROFILE, _analysis(activity_streak=31), _stats(), EVENTS)
    assert result.pattern(PatternKind.streak).severity == "exceptional"
    assert "Impressively, they've maintained a 31-day activity streak!" in result.summary


@pytest.mark.parametrize(
    "hour, word",
    [(0, "night owl"), (5, "night owl"), (6, "morning"), (11, "morning"), (12, "afternoon"), (18, "evening"), (23, "evening")],
)
def test_schedule_buckets(hour, word):
    assert word in schedule_description(hour)


def test_schedule_pattern_uses_peak_hour():
    result = generate_activity_summary(PROFILE, _analysis(), _stats(), EVENTS)
    assert "morning" in result.pattern(PatternKind.schedule).description


def test_highlights_and_achievements():
    analysis = _analysis(
        event_counts={"PushEvent": 10, "PullRequestReviewEvent": 6, "IssuesEvent": 11},
        total_events=27,
    )
    stats = _stats(
        total_stars=150,
        total_repos=60,
        languages={"A": 5, "B": 4, "C": 3, "D": 2, "E": 1, "F": 1},
    )
    result = generate_activity_summary(PROFILE, analysis, stats, EVENTS)
    assert result.activity_highlights == [
        'Heavily focused on "project1"',
        "Active code reviewer",
        "Active issue tracker",
    ]
    assert result.achievements == [
        "Code Review Champion",
        "Earned 150 stars",
        "Prolific creator with 50+ repositories",
        "Polyglot developer using 6 languages",
    ]
    assert len(result.languages) == 5


def test_push_heavy_highlight():
    result = generate_activity_summary(PROFILE, _analysis(), _stats(), EVENTS)
    assert "Primarily focused on pushing code" in result.activity_highlights


def test_recent_projects_details():
    events = [
        make_event("PushEvent", "u/one", payload={"commits": [{}]}),
        make_event("PushEvent", "u/one", payload={"commits": [{}, {}]}),
        make_event("PushEvent", "u/two", payload={"commits": [{}, {}]}),
        make_event("IssuesEvent", "u/three", payload={"issue": {"title": "Broken build"}}),
        make_event("CreateEvent", "u/four", payload={"ref_type": "branch"}),
        make_event("SponsorshipEvent", "u/five"),
        make_event("WatchEvent", "u/six"),
        make_event("PushEvent", None),
    ]
    projects = extract_recent_projects(events)
    assert [p.name for p in projects] == ["one", "two", "three", "four", "five"]
    assert [p.detail for p in projects] == ["1 commit", "2 commits", "Broken build", "Created branch", None]
    assert projects[0].activity_type == "code commits"
    assert projects[4].activity_type == "SponsorshipEvent"
    assert projects[0].full_name == "u/one"


def test_narrative_sentences_in_order():
    result = generate_activity_summary(PROFILE, _analysis(), _stats(), EVENTS)
    assert result.summary == (
        "Test User is a developer who primarily works with JavaScript. "
        "They are an early bird, most productive in the morning. "
        "They've been on a 7-day activity streak. "
        "Recently active on: project1, project2. "
        "Stats: 15 repositories, 50 stars earned."
    )


def test_empty_everything_still_reads_well():
    analysis = EventAnalysis()
    stats = ContributionStats()
    result = generate_activity_summary(Profile(login="ghost"), analysis, stats, [])
    assert result.summary == "ghost is an active developer on GitHub."
    assert result.primary_language is None
    assert result.notable_patterns == []
    assert result.achievements == []
    assert result.recent_projects == []


def test_short_summary_variants():
    assert generate_short_summary(PROFILE, _analysis(), _stats()) == "Test User: JavaScript developer on a 7-day streak"
    assert generate_short_summary(PROFILE, _analysis(activity_streak=3), _stats()) == "Test User: Active JavaScript developer"
    assert generate_short_summary(PROFILE, _analysis(), _stats(languages={})) == "Test User: Active GitHub contributor"
