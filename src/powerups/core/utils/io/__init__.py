"""I/O utilities for powerups.

- Core: text read/write, directory listing and management
- JSON: read helper
- YAML: read helpers
"""
from __future__ import annotations

from .core import (
    PathLike,
    ensure_directory,
    ensure_parent_dir,
    list_files,
    read_text,
    write_text,
)
from .json import read_json
from .yaml import read_yaml

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "read_text",
    "write_text",
    "list_files",
    # json
    "read_json",
    # yaml
    "read_yaml",
]
