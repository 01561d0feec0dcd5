from __future__ import annotations

import json
import sys
from typing import Any

from pydantic import BaseModel


def write_json(data: Any, out: str = "-") -> None:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    buf = json.dumps(data, ensure_ascii=False, indent=2, default=str)
    if out == "-":
        sys.stdout.write(buf + "\n")
    else:
        with open(out, "w", encoding="utf-8") as f:
            f.write(buf)
