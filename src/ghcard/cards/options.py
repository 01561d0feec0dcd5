from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .themes import DEFAULT_THEME


class CardType(str, Enum):
    activity = "activity"
    compact = "compact"
    languages = "languages"


class LanguageLayout(str, Enum):
    compact = "compact"
    normal = "normal"


class CardOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: CardType = CardType.activity
    theme: str = DEFAULT_THEME
    # None picks the card type's own default width
    width: Optional[int] = None
    show_border: bool = True
    border_radius: float = 4.5
    hide_stats: bool = False
    hide_projects: bool = False
    layout: LanguageLayout = LanguageLayout.compact
