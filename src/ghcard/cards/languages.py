from __future__ import annotations

from ghcard.core.models import ActivitySummary

from .options import CardOptions, LanguageLayout
from .svg import FONT, background_rect, border_attrs, escape, num, svg_open
from .themes import get_theme

DEFAULT_WIDTH = 300
FALLBACK_COLOR = "#858585"
MAX_LANGUAGES = 5
LABELS_PER_ROW = 3
LABEL_SPACING = 90
BAR_HEIGHT = 8

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#2b7489",
    "Python": "#3572A5",
    "Java": "#b07219",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Swift": "#ffac45",
    "Kotlin": "#F18E33",
    "Scala": "#c22d40",
    "Shell": "#89e051",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Vue": "#41b883",
    "Dart": "#00B4AB",
    "Elixir": "#6e4a7e",
}


def language_color(name: str) -> str:
    return LANGUAGE_COLORS.get(name, FALLBACK_COLOR)


def language_percentages(sizes: list[tuple[str, int]]) -> list[tuple[str, str]]:
    """(name, percentage with one decimal) for the largest languages."""
    total = sum(size for _, size in sizes) or 1
    return [(name, f"{size / total * 100:.1f}") for name, size in sizes[:MAX_LANGUAGES]]


def render_languages_card(summary: ActivitySummary, options: CardOptions = CardOptions()) -> str:
    theme = get_theme(options.theme)
    width = options.width or DEFAULT_WIDTH
    height = 100 if options.layout == LanguageLayout.compact else 140
    data = language_percentages(summary.language_sizes)

    parts: list[str] = [
        svg_open(width, height),
        "  <style>\n"
        f"    .title {{ font: 600 14px {FONT}; fill: {theme.title}; }}\n"
        f"    .lang-name {{ font: 400 11px {FONT}; fill: {theme.text}; }}\n"
        f"    .lang-percent {{ font: 600 11px {FONT}; fill: {theme.text}; }}\n"
        "  </style>\n\n",
        background_rect(width, height, options.border_radius, theme.background, border_attrs(options.show_border, theme.border)),
        '\n  <text x="15" y="25" class="title">Most Used Languages</text>\n',
        '<g transform="translate(0, 40)">',
    ]

    bar_x = 15.0
    bar_width = width - 30
    for name, percentage in data:
        segment = float(percentage) / 100 * bar_width
        if segment > 0:
            parts.append(
                f'\n    <rect x="{num(bar_x)}" y="0" width="{num(segment)}" height="{BAR_HEIGHT}" '
                f'fill="{language_color(name)}" rx="1"/>\n'
            )
            bar_x += segment
    parts.append("</g>")

    label_x, label_y = 15, 60
    for i, (name, percentage) in enumerate(data):
        if i > 0 and i % LABELS_PER_ROW == 0:
            label_y += 20
            label_x = 15
        parts.append(
            f'\n  <g transform="translate({label_x}, {label_y})">\n'
            f'    <circle cx="4" cy="5" r="4" fill="{language_color(name)}"/>\n'
            f'    <text x="12" y="9" class="lang-name">{escape(name)}</text>\n'
            f'    <text x="{12 + len(name) * 6 + 5}" y="9" class="lang-percent">{percentage}%</text>\n'
            "  </g>\n"
        )
        label_x += LABEL_SPACING

    parts.append("\n</svg>")
    return "".join(parts).strip()
