"""JSON I/O helpers shared by the tools."""

import json
from pathlib import Path
from typing import Any


def save_json(data: Any, path: Path) -> None:
    """Write JSON with 2-space indent and a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
