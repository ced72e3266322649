"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (where .powerups.yaml is looked up)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override repository root path (defaults to the working directory)",
    )


def add_target_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional target document argument."""
    parser.add_argument("target", help="Document to process")


def add_overwrite_flag(parser: argparse.ArgumentParser) -> None:
    """Add --overwrite flag."""
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Write the result back to the target file instead of printing it",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add standard flags that every command uses.

    Adds: target, --overwrite, --json, --repo-root
    """
    add_target_arg(parser)
    add_overwrite_flag(parser)
    add_json_flag(parser)
    add_repo_root_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_target_arg",
    "add_overwrite_flag",
    "add_standard_flags",
]
