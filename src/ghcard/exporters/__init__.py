from __future__ import annotations

from .json import write_json
from .svg import sibling_path, write_svg

__all__ = ["sibling_path", "write_json", "write_svg"]
