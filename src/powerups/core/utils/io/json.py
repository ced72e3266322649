"""JSON read helper."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .core import PathLike, read_text


def read_json(file_path: PathLike) -> Any:
    """Read JSON; raises FileNotFoundError on missing files and
    json.JSONDecodeError on malformed content."""
    path = Path(file_path)
    return json.loads(read_text(path))


__all__ = ["read_json"]
