from __future__ import annotations

from ghcard.core.models import ActivitySummary

from .options import CardOptions
from .svg import FONT, background_rect, border_attrs, escape, svg_open
from .themes import get_theme

DEFAULT_WIDTH = 350
HEIGHT = 80


def render_compact_card(summary: ActivitySummary, options: CardOptions = CardOptions()) -> str:
    theme = get_theme(options.theme)
    width = options.width or DEFAULT_WIDTH
    stats = summary.stats
    language = ""
    if summary.primary_language:
        x = len(summary.display_name) * 8 + 10
        language = f'<text x="{x}" class="value">{escape(summary.primary_language)}</text>'

    return (
        svg_open(width, HEIGHT)
        + "  <style>\n"
        f"    .title {{ font: 600 14px {FONT}; fill: {theme.title}; }}\n"
        f"    .stat {{ font: 400 11px {FONT}; fill: {theme.text}; }}\n"
        f"    .value {{ font: 600 11px {FONT}; fill: {theme.accent}; }}\n"
        "  </style>\n\n"
        + background_rect(width, HEIGHT, options.border_radius, theme.background, border_attrs(options.show_border, theme.border))
        + "\n"
        '  <g transform="translate(15, 25)">\n'
        f'    <text class="title">{escape(summary.display_name)}</text>\n'
        f"    {language}\n"
        "  </g>\n\n"
        '  <g transform="translate(15, 50)">\n'
        f'    <text class="stat">Repos: <tspan class="value">{stats.total_repos}</tspan></text>\n'
        f'    <text x="80" class="stat">Stars: <tspan class="value">{stats.total_stars}</tspan></text>\n'
        f'    <text x="150" class="stat">Streak: <tspan class="value">{stats.activity_streak}d</tspan></text>\n'
        f'    <text x="230" class="stat">Events: <tspan class="value">{stats.total_events}</tspan></text>\n'
        "  </g>\n"
        "</svg>"
    )
