from __future__ import annotations

from ghcard.core.models import ActivitySummary

from .activity import render_activity_card
from .compact import render_compact_card
from .error import render_error_card
from .languages import render_languages_card
from .options import CardOptions, CardType, LanguageLayout
from .themes import THEMES, Theme, get_theme, theme_names

_RENDERERS = {
    CardType.activity: render_activity_card,
    CardType.compact: render_compact_card,
    CardType.languages: render_languages_card,
}


def render_card(summary: ActivitySummary, options: CardOptions = CardOptions()) -> str:
    return _RENDERERS[options.type](summary, options)


def card_types() -> list[str]:
    return [t.value for t in CardType]


__all__ = [
    "CardOptions",
    "CardType",
    "LanguageLayout",
    "THEMES",
    "Theme",
    "card_types",
    "get_theme",
    "render_activity_card",
    "render_card",
    "render_compact_card",
    "render_error_card",
    "render_languages_card",
    "theme_names",
]
