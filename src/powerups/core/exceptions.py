from __future__ import annotations

from typing import Any, Dict, Mapping


class PowerUpsError(Exception):
    """Base exception for powerups."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class IncludeNotFoundError(PowerUpsError, FileNotFoundError):
    """Raised when an include or variables name is missing from the file index."""

    def __init__(
        self,
        name: str,
        *,
        kind: str = "include",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["name"] = name
        ctx["kind"] = kind
        message = f"{name} not found!"
        PowerUpsError.__init__(self, message, context=ctx)
        FileNotFoundError.__init__(self, message)
        self.name = name
        self.kind = kind


class VariablesParseError(PowerUpsError, ValueError):
    """Raised when a variables file is not a JSON object of string values."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        PowerUpsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class CircularIncludeError(PowerUpsError, RecursionError):
    """Raised when nested includes exceed the configured depth."""

    def __init__(self, chain: list[str], max_depth: int) -> None:
        message = (
            f"Include depth limit ({max_depth}) exceeded, "
            f"probable circular include: {' -> '.join(chain)}"
        )
        PowerUpsError.__init__(self, message, context={"chain": list(chain), "max_depth": max_depth})
        RecursionError.__init__(self, message)
        self.chain = list(chain)


class FileDecodeError(PowerUpsError, ValueError):
    """Raised when a file is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Cannot decode {path} as UTF-8" + (f": {reason}" if reason else "")
        PowerUpsError.__init__(self, message, context={"path": path})
        ValueError.__init__(self, message)
        self.path = path


class ConfigError(PowerUpsError, ValueError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        PowerUpsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "PowerUpsError",
    "IncludeNotFoundError",
    "VariablesParseError",
    "CircularIncludeError",
    "FileDecodeError",
    "ConfigError",
]
