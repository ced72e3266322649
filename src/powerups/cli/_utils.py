"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict

from powerups.core.config import ConfigManager
from powerups.core.utils.io import write_text

logger = logging.getLogger(__name__)

SEPARATOR = "---------------------------------"


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from args, defaulting to the working directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd()


def load_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load merged configuration for the invocation's repository root."""
    return ConfigManager(get_repo_root(args)).load_config()


def get_target(args: argparse.Namespace) -> Path:
    return Path(args.target).expanduser().resolve()


def emit_result(
    formatter: Any,
    args: argparse.Namespace,
    target: Path,
    text: str,
    report: Any,
) -> None:
    """Write ``text`` back to ``target`` (--overwrite) or print it."""
    overwrite = bool(getattr(args, "overwrite", False))
    if overwrite:
        logger.info("Overwrites source file %s", target)
        write_text(target, text)

    if formatter.json_mode:
        formatter.success(
            {
                "file": str(target),
                "overwritten": overwrite,
                "content": None if overwrite else text,
                "report": report.to_dict(),
            },
            message="",
        )
    elif overwrite:
        formatter.text(f"Overwrote {target}")
    else:
        formatter.text(SEPARATOR)
        formatter.text(text)


__all__ = ["SEPARATOR", "get_repo_root", "load_config", "get_target", "emit_result"]
