"""Domain-specific configuration accessors."""
from __future__ import annotations

from .expansion import ExpansionConfig
from .index import IndexConfig
from .logging import LoggingConfig

__all__ = ["ExpansionConfig", "IndexConfig", "LoggingConfig"]
