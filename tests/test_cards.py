from __future__ import annotations

import pytest

from ghcard.cards import (
    CardOptions,
    CardType,
    LanguageLayout,
    render_activity_card,
    render_card,
    render_compact_card,
    render_error_card,
    render_languages_card,
)
from ghcard.cards.svg import escape, num, wrap_text
from ghcard.core.models import ActivitySummary


def test_activity_card_is_svg(summary):
    svg = render_activity_card(summary)
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert 'xmlns="http://www.w3.org/2000/svg"' in svg
    assert "Test User" in svg


def test_activity_card_sections(summary):
    svg = render_activity_card(summary)
    assert ">Stats<" in svg
    assert "Repositories" in svg
    assert ">15<" in svg
    assert ">50<" in svg
    assert "Recent Projects" in svg
    assert "project1" in svg and "project2" in svg
    assert "Code Review Champion" in svg


def test_hide_sections(summary):
    assert ">Stats<" not in render_activity_card(summary, CardOptions(hide_stats=True))
    assert "Recent Projects" not in render_activity_card(summary, CardOptions(hide_projects=True))


def test_border_options(summary):
    assert "stroke=" not in render_activity_card(summary, CardOptions(show_border=False))
    assert 'rx="10"' in render_activity_card(summary, CardOptions(border_radius=10))
    assert 'rx="4.5"' in render_activity_card(summary)


def test_theme_colors(summary):
    assert "#151515" in render_activity_card(summary, CardOptions(theme="dark"))
    assert "#ffffff" in render_activity_card(summary, CardOptions(theme="unknown-theme"))


@pytest.mark.parametrize("theme", ["default", "dark", "radical", "dracula", "nord", "github-dark"])
def test_known_themes_render(summary, theme):
    svg = render_activity_card(summary, CardOptions(theme=theme))
    assert svg.startswith("<svg") and svg.endswith("</svg>")


def test_markup_is_escaped(summary):
    hostile = summary.model_copy(update={"display_name": 'Test <script>alert("xss")</script> User'})
    svg = render_activity_card(hostile)
    assert "<script>" not in svg
    assert "&lt;script&gt;" in svg


def test_rendering_is_deterministic(summary):
    for card_type in CardType:
        options = CardOptions(type=card_type, theme="nord")
        assert render_card(summary, options) == render_card(summary, options)


def test_minimum_height_for_empty_summary():
    empty = ActivitySummary(username="ghost", display_name="ghost")
    svg = render_activity_card(empty, CardOptions(hide_stats=True))
    assert 'height="195"' in svg


def test_height_grows_with_content(summary):
    svg = render_activity_card(summary)
    # 120 + 3 lines * 18 + 20 + 50 stats + 30 + 2 * 22 projects + 40 achievements
    assert 'height="358"' in svg


def test_compact_card(summary):
    svg = render_compact_card(summary)
    assert 'width="350"' in svg
    assert 'height="80"' in svg
    for label in ("Repos", "Stars", "Streak", "Events"):
        assert label in svg


def test_languages_card_percentages(summary):
    svg = render_languages_card(summary)
    for name in ("JavaScript", "Python", "TypeScript"):
        assert name in svg
    assert "50.0%" in svg
    assert "30.0%" in svg
    assert 'height="100"' in svg


def test_languages_card_theme_layout_and_fallback_color(summary):
    odd = summary.model_copy(update={"language_sizes": [("Zig", 10)]})
    svg = render_languages_card(odd, CardOptions(theme="dracula", layout=LanguageLayout.normal))
    assert "#282a36" in svg
    assert "#858585" in svg
    assert "100.0%" in svg
    assert 'height="140"' in svg


def test_render_card_dispatch(summary):
    assert "Most Used Languages" in render_card(summary, CardOptions(type=CardType.languages))
    assert 'height="80"' in render_card(summary, CardOptions(type=CardType.compact))
    assert "GitHub Activity" in render_card(summary)


def test_error_card_escapes_and_truncates():
    svg = render_error_card("<b>" + "x" * 200)
    assert "&lt;b&gt;" in svg
    assert "x" * 97 in svg
    assert "x" * 98 not in svg


def test_escape_and_helpers():
    assert escape("a & b < c > \" '") == "a &amp; b &lt; c &gt; &quot; &#39;"
    assert escape(None) == ""
    assert num(10.0) == "10"
    assert num(4.5) == "4.5"
    assert wrap_text("one two three four", 9) == ["one two", "three", "four"]
    assert wrap_text("", 10) == []
