"""Domain-specific configuration for include expansion."""
from __future__ import annotations

from functools import cached_property

from powerups.core.exceptions import ConfigError
from powerups.core.expansion.engine import DEFAULT_MAX_DEPTH, DEFAULT_NESTING_INDENT

from ..base import BaseDomainConfig


class ExpansionConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "expansion"

    @cached_property
    def nesting_indent(self) -> str:
        value = self.section.get("nesting_indent", DEFAULT_NESTING_INDENT)
        if isinstance(value, int):
            return " " * value
        return str(value) if value is not None else DEFAULT_NESTING_INDENT

    @cached_property
    def max_depth(self) -> int:
        """Include depth limit; 0 forbids includes altogether."""
        value = self.section.get("max_depth")
        if value is None:
            return DEFAULT_MAX_DEPTH
        try:
            depth = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"expansion.max_depth must be an integer, got {value!r}",
                context={"key": "expansion.max_depth"},
            ) from exc
        if depth < 0:
            raise ConfigError(
                f"expansion.max_depth must not be negative, got {depth}",
                context={"key": "expansion.max_depth"},
            )
        return depth
