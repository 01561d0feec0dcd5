from __future__ import annotations

from typing import Optional, Union

FONT = "'Segoe UI', Ubuntu, Sans-Serif"

_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}


def escape(value: Optional[object]) -> str:
    if value is None or value == "":
        return ""
    return "".join(_ESCAPES.get(ch, ch) for ch in str(value))


def num(value: Union[int, float]) -> str:
    """Format a coordinate without a trailing ``.0``."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)


def wrap_text(text: Optional[str], max_chars: int = 50) -> list[str]:
    """Greedy word wrap; a single word longer than the budget gets its own line."""
    if not text:
        return []
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}".strip()
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def border_attrs(show_border: bool, color: str) -> str:
    if not show_border:
        return ""
    return f'stroke="{color}" stroke-width="1" stroke-opacity="1"'


def background_rect(width: int, height: int, radius: float, fill: str, border: str) -> str:
    return (
        f'  <rect x="0.5" y="0.5" rx="{num(radius)}" width="{num(width - 1)}" height="{num(height - 1)}"\n'
        f'        fill="{fill}" {border}/>\n'
    )


def svg_open(width: int, height: int) -> str:
    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}"\n'
        '     fill="none" xmlns="http://www.w3.org/2000/svg">\n'
    )
