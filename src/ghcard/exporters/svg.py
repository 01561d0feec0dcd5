from __future__ import annotations

import sys
from pathlib import Path


def write_svg(svg: str, out: str = "-") -> Path | None:
    if out == "-":
        sys.stdout.write(svg + "\n")
        return None
    path = Path(out).expanduser().resolve()
    path.write_text(svg, encoding="utf-8")
    return path


def sibling_path(out: str, suffix: str) -> str:
    """``card.svg`` + ``compact`` -> ``card-compact.svg`` in the same directory."""
    path = Path(out)
    return str(path.with_name(f"{path.stem}-{suffix}{path.suffix or '.svg'}"))
