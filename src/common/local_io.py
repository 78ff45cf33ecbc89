"""Local file I/O utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON file."""
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write ``data`` as indented JSON followed by a trailing newline."""
    with path.open("w", encoding="utf-8") as f:
        f.write(json.dumps(data, indent=indent, ensure_ascii=False) + "\n")
