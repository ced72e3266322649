"""powerups configuration: bundled defaults, project YAML and env overrides."""
from __future__ import annotations

from .base import BaseDomainConfig
from .domains import ExpansionConfig, IndexConfig, LoggingConfig
from .manager import ENV_PREFIX, PROJECT_CONFIG_FILENAME, ConfigManager

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "ExpansionConfig",
    "IndexConfig",
    "LoggingConfig",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
]
