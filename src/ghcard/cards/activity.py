from __future__ import annotations

from ghcard.core.models import ActivitySummary

from .options import CardOptions
from .svg import FONT, background_rect, border_attrs, escape, num, svg_open, wrap_text
from .themes import get_theme

DEFAULT_WIDTH = 495
MIN_HEIGHT = 195
SUMMARY_CHARS_PER_LINE = 55
LINE_HEIGHT = 18
PROJECT_ROW_HEIGHT = 22
MAX_PROJECTS_SHOWN = 3
MAX_ACHIEVEMENTS_SHOWN = 3
DETAIL_MAX_CHARS = 40


def _card_height(summary: ActivitySummary, lines: list[str], options: CardOptions) -> int:
    height = 120
    height += len(lines) * LINE_HEIGHT + 20
    if not options.hide_stats:
        height += 50
    if not options.hide_projects and summary.recent_projects:
        height += 30 + min(len(summary.recent_projects), MAX_PROJECTS_SHOWN) * PROJECT_ROW_HEIGHT
    if summary.achievements:
        height += 40
    return max(height, MIN_HEIGHT)


def render_activity_card(summary: ActivitySummary, options: CardOptions = CardOptions()) -> str:
    theme = get_theme(options.theme)
    width = options.width or DEFAULT_WIDTH
    lines = wrap_text(summary.summary, SUMMARY_CHARS_PER_LINE)
    height = _card_height(summary, lines, options)

    parts: list[str] = [
        svg_open(width, height),
        "  <style>\n"
        f"    .header {{ font: 600 18px {FONT}; fill: {theme.title}; }}\n"
        f"    .stat-label {{ font: 400 12px {FONT}; fill: {theme.text}; }}\n"
        f"    .stat-value {{ font: 600 14px {FONT}; fill: {theme.title}; }}\n"
        f"    .summary-text {{ font: 400 13px {FONT}; fill: {theme.text}; }}\n"
        f"    .project-name {{ font: 600 12px {FONT}; fill: {theme.accent}; }}\n"
        f"    .project-detail {{ font: 400 11px {FONT}; fill: {theme.text}; opacity: 0.8; }}\n"
        f"    .section-title {{ font: 600 13px {FONT}; fill: {theme.title}; }}\n"
        f"    .achievement {{ font: 400 11px {FONT}; fill: {theme.accent}; }}\n"
        f"    .language-tag {{ font: 600 11px {FONT}; fill: {theme.text}; }}\n"
        "    @keyframes fadeIn {\n"
        "      from { opacity: 0; }\n"
        "      to { opacity: 1; }\n"
        "    }\n"
        "    .animate { animation: fadeIn 0.3s ease-in-out forwards; }\n"
        "  </style>\n\n",
        background_rect(width, height, options.border_radius, theme.background, border_attrs(options.show_border, theme.border)),
    ]

    y = 35
    parts.append(
        f'\n  <g transform="translate(25, {y})">\n'
        f"    <text class=\"header\">{escape(summary.display_name)}'s GitHub Activity</text>\n"
        "  </g>\n"
    )
    y += 15

    if summary.primary_language:
        parts.append(
            f'\n  <g transform="translate(25, {y})">\n'
            f'    <circle cx="6" cy="5" r="6" fill="{theme.accent}"/>\n'
            f'    <text x="18" y="9" class="language-tag">{escape(summary.primary_language)}</text>\n'
            "  </g>\n"
        )
        y += 25
    else:
        y += 10

    for i, line in enumerate(lines):
        parts.append(
            f'\n  <text x="25" y="{y + i * LINE_HEIGHT}" class="summary-text animate" '
            f'style="animation-delay: {num(round(i * 0.1, 1))}s">\n'
            f"    {escape(line)}\n"
            "  </text>\n"
        )
    y += len(lines) * LINE_HEIGHT + 15

    if not options.hide_stats:
        parts.append(
            f'\n  <g transform="translate(25, {y})">\n'
            '    <text class="section-title">Stats</text>\n'
            "  </g>\n"
        )
        y += 20
        stats = summary.stats
        items = [
            ("Repositories", stats.total_repos),
            ("Stars", stats.total_stars),
            ("Activity Streak", f"{stats.activity_streak} days"),
            ("Recent Events", stats.total_events),
        ]
        x = 25
        for label, value in items:
            parts.append(
                f'\n    <g transform="translate({x}, {y})">\n'
                f'      <text class="stat-value">{escape(str(value))}</text>\n'
                f'      <text y="14" class="stat-label">{escape(label)}</text>\n'
                "    </g>\n"
            )
            x += 105
        y += 40

    if not options.hide_projects and summary.recent_projects:
        parts.append(
            f'\n  <g transform="translate(25, {y})">\n'
            '    <text class="section-title">Recent Projects</text>\n'
            "  </g>\n"
        )
        y += 20
        for project in summary.recent_projects[:MAX_PROJECTS_SHOWN]:
            detail = ""
            if project.detail:
                clipped = project.detail[:DETAIL_MAX_CHARS]
                ellipsis = "..." if len(project.detail) > DETAIL_MAX_CHARS else ""
                detail = f" - {clipped}{ellipsis}"
            parts.append(
                f'\n  <g transform="translate(25, {y})">\n'
                f'    <text class="project-name">{escape(project.name)}</text>\n'
                f'    <text x="{len(project.name) * 7 + 5}" class="project-detail">{escape(detail)}</text>\n'
                "  </g>\n"
            )
            y += PROJECT_ROW_HEIGHT

    if summary.achievements:
        y += 10
        parts.append(f'\n  <g transform="translate(25, {y})">\n')
        x = 0
        for achievement in summary.achievements[:MAX_ACHIEVEMENTS_SHOWN]:
            badge_width = len(achievement) * 6 + 16
            parts.append(
                f'\n    <rect x="{x}" y="-10" width="{badge_width}" height="18" rx="9" fill="{theme.accent}" opacity="0.2"/>\n'
                f'    <text x="{x + 8}" y="3" class="achievement">{escape(achievement)}</text>\n'
            )
            x += badge_width + 8
        parts.append("\n  </g>\n")

    parts.append("\n</svg>")
    return "".join(parts).strip()
