from __future__ import annotations

from .analyze import ActivityData, fetch_activity_data, summarize_github_user
from .contributions import aggregate_contributions
from .events import analyze_events
from .summary import generate_activity_summary, generate_short_summary

__all__ = [
    "ActivityData",
    "aggregate_contributions",
    "analyze_events",
    "fetch_activity_data",
    "generate_activity_summary",
    "generate_short_summary",
    "summarize_github_user",
]
