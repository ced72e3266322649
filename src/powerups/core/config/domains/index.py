"""Domain-specific configuration for the source file index."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class IndexConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "index"

    @cached_property
    def folder(self) -> Optional[Path]:
        """Default includes folder, resolved against the repository root."""
        raw = self.section.get("folder")
        if not raw:
            return None
        path = Path(str(raw)).expanduser()
        return path if path.is_absolute() else self.repo_root / path

    @cached_property
    def recursive(self) -> bool:
        return bool(self.section.get("recursive", False))

    @cached_property
    def include_hidden(self) -> bool:
        return bool(self.section.get("include_hidden", False))
