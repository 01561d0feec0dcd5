from __future__ import annotations

from .svg import FONT, escape

MESSAGE_MAX_CHARS = 100


def render_error_card(message: str) -> str:
    text = escape(message[:MESSAGE_MAX_CHARS])
    return (
        '<svg width="495" height="120" viewBox="0 0 495 120" fill="none" xmlns="http://www.w3.org/2000/svg">\n'
        "  <style>\n"
        f"    .header {{ font: 600 18px {FONT}; fill: #e74c3c; }}\n"
        f"    .message {{ font: 400 14px {FONT}; fill: #666; }}\n"
        "  </style>\n"
        '  <rect x="0.5" y="0.5" rx="4.5" width="494" height="119" fill="#ffeef0" stroke="#e74c3c" stroke-width="1"/>\n'
        '  <text x="25" y="35" class="header">Error</text>\n'
        f'  <text x="25" y="60" class="message">{text}</text>\n'
        '  <text x="25" y="85" class="message">Please check the username and try again.</text>\n'
        "</svg>"
    )
