"""
powerups CLI package.

Commands are auto-discovered from ``cli/commands/``; each module exposes
``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_overwrite_flag,
    add_repo_root_flag,
    add_standard_flags,
    add_target_arg,
)
from ._utils import SEPARATOR, emit_result, get_repo_root, get_target, load_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_overwrite_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "add_target_arg",
    # Utilities
    "SEPARATOR",
    "emit_result",
    "get_repo_root",
    "get_target",
    "load_config",
]
