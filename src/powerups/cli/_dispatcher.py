"""
Auto-discovery CLI dispatcher for powerups.

Scans ``cli/commands/`` for command modules and registers them.
Adding a new command = adding a .py file exposing SUMMARY, register_args
and main.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from powerups.cli._utils import get_repo_root
from powerups.core.config import ConfigManager, LoggingConfig
from powerups.core.exceptions import ConfigError
from powerups.core.stdlib_logging import configure_logging

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"powerups.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered commands."""
    parser = argparse.ArgumentParser(
        prog="powerups",
        description="Include and variable preprocessor for marked-up documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...); overrides logging.level from config",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in discover_commands().items():
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from powerups import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    """Install the log handler from config, honouring --log-level."""
    level = getattr(args, "log_level", None)
    log_path = None
    try:
        repo_root = get_repo_root(args)
        cfg = LoggingConfig(repo_root, config=ConfigManager(repo_root).load_config())
        level = level or cfg.level
        log_path = cfg.file
    except ConfigError:
        # The command reports the configuration error itself.
        pass
    configure_logging(level=level or "WARNING", log_path=log_path)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the powerups CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "_func", None):
        parser.print_help()
        return 0

    _configure_logging(args)
    logger.debug("Invocation: %s", " ".join(argv))
    return int(args._func(args))


if __name__ == "__main__":
    sys.exit(main())
