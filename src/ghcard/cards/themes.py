from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    background: str
    border: str
    title: str
    text: str
    icon: str
    accent: str


DEFAULT_THEME = "default"

THEMES: dict[str, Theme] = {
    "default": Theme(background="#ffffff", border="#e4e2e2", title="#2f80ed", text="#434d58", icon="#4c71f2", accent="#2f80ed"),
    "dark": Theme(background="#151515", border="#e4e2e2", title="#fff", text="#9f9f9f", icon="#79ff97", accent="#79ff97"),
    "radical": Theme(background="#141321", border="#e4e2e2", title="#fe428e", text="#a9fef7", icon="#f8d847", accent="#fe428e"),
    "merko": Theme(background="#0a0f0b", border="#e4e2e2", title="#abd200", text="#68b587", icon="#b7d364", accent="#abd200"),
    "gruvbox": Theme(background="#282828", border="#e4e2e2", title="#fabd2f", text="#8ec07c", icon="#fe8019", accent="#fabd2f"),
    "tokyonight": Theme(background="#1a1b27", border="#e4e2e2", title="#70a5fd", text="#38bdae", icon="#bf91f3", accent="#70a5fd"),
    "onedark": Theme(background="#282c34", border="#e4e2e2", title="#e4bf7a", text="#df6d74", icon="#8eb573", accent="#e4bf7a"),
    "cobalt": Theme(background="#193549", border="#e4e2e2", title="#e683d9", text="#75eeb2", icon="#0480ef", accent="#e683d9"),
    "synthwave": Theme(background="#2b213a", border="#e4e2e2", title="#e2e9ec", text="#e5289e", icon="#ef8539", accent="#f97583"),
    "highcontrast": Theme(background="#000000", border="#e4e2e2", title="#e7f216", text="#fff", icon="#00ffff", accent="#e7f216"),
    "dracula": Theme(background="#282a36", border="#e4e2e2", title="#ff79c6", text="#f8f8f2", icon="#bd93f9", accent="#ff79c6"),
    "monokai": Theme(background="#272822", border="#e4e2e2", title="#f92672", text="#f8f8f2", icon="#66d9ef", accent="#a6e22e"),
    "vue": Theme(background="#35495e", border="#e4e2e2", title="#41b883", text="#fffffe", icon="#41b883", accent="#41b883"),
    "vue-dark": Theme(background="#0d1117", border="#e4e2e2", title="#42b883", text="#adbac7", icon="#42b883", accent="#42b883"),
    "github": Theme(background="#ffffff", border="#e4e2e2", title="#0366d6", text="#586069", icon="#0366d6", accent="#0366d6"),
    "github-dark": Theme(background="#0d1117", border="#30363d", title="#58a6ff", text="#c9d1d9", icon="#58a6ff", accent="#58a6ff"),
    "nord": Theme(background="#2e3440", border="#e4e2e2", title="#88c0d0", text="#d8dee9", icon="#81a1c1", accent="#88c0d0"),
    "algolia": Theme(background="#050f2c", border="#e4e2e2", title="#00aeff", text="#ffffff", icon="#2dde98", accent="#00aeff"),
    "sunset": Theme(background="#1a1a2e", border="#e4e2e2", title="#ffc857", text="#e8e8e8", icon="#e94560", accent="#ffc857"),
    "ocean": Theme(background="#0f4c75", border="#3282b8", title="#bbe1fa", text="#ffffff", icon="#1b262c", accent="#bbe1fa"),
}


def get_theme(name: str) -> Theme:
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def theme_names() -> list[str]:
    return list(THEMES)
