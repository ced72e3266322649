from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from powerups.core.utils.io import ensure_directory

_POWERUPS_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Configure stdlib logging for the ``powerups`` logger hierarchy.

    Logs go to ``log_path`` when given, otherwise to stderr (stdout carries the
    processed document). Idempotent per-process: reconfiguring with the same
    target only updates the level.
    """
    global _POWERUPS_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    logger = logging.getLogger("powerups")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _POWERUPS_HANDLER is not None:
        _POWERUPS_HANDLER.setLevel(_level_from_name(level))
        return

    if _POWERUPS_HANDLER is not None:
        logger.removeHandler(_POWERUPS_HANDLER)
        _POWERUPS_HANDLER.close()
        _POWERUPS_HANDLER = None

    handler: logging.Handler
    if log_path:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _POWERUPS_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by configure_logging."""
    global _POWERUPS_HANDLER, _CONFIGURED_TARGET
    if _POWERUPS_HANDLER is not None:
        logging.getLogger("powerups").removeHandler(_POWERUPS_HANDLER)
        _POWERUPS_HANDLER.close()
    _POWERUPS_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["configure_logging", "reset_logging_for_tests", "LOG_FORMAT"]
