"""
powerups expand command.

SUMMARY: Expand include directives in a document (after stripping old expansions)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from powerups.cli import (
    OutputFormatter,
    add_standard_flags,
    emit_result,
    get_repo_root,
    get_target,
    load_config,
)
from powerups.core.config import IndexConfig
from powerups.core.exceptions import PowerUpsError
from powerups.core.expansion import (
    ExpansionReport,
    Preprocessor,
    build_file_index,
    load_variables_file,
)
from powerups.core.utils.io import read_text

SUMMARY = "Expand include directives in a document (after stripping old expansions)"

logger = logging.getLogger(__name__)


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)
    parser.add_argument(
        "--includes-folder",
        "--includesFolder",
        dest="includes_folder",
        type=str,
        help=(
            "Folder holding the files directives refer to (default: index.folder from config); "
            "without one, old expansions are stripped and directives are left as they are"
        ),
    )
    parser.add_argument(
        "--variables",
        type=str,
        help="JSON file with global variables (object of string values)",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="Also index files in sub-folders of the includes folder",
    )


def main(args: argparse.Namespace) -> int:
    """Expand a document."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        repo_root = get_repo_root(args)
        config = load_config(args)
        target = get_target(args)
        logger.info("File: %s", target)
        text = read_text(target)

        variables = {}
        if args.variables:
            variables_path = Path(args.variables).expanduser()
            logger.info("Global variables: %s", variables_path)
            variables = load_variables_file(variables_path)

        index_cfg = IndexConfig(repo_root, config=config)
        folder = Path(args.includes_folder).expanduser() if args.includes_folder else index_cfg.folder
        if folder is None:
            # Without an includes folder only old expansions are stripped.
            logger.warning("No includes folder given, skipping include expansion")
            report = ExpansionReport(document=str(target))
            report.add_warning("No includes folder given, include expansion skipped")
            result = Preprocessor().cleanup(text, report)
            emit_result(formatter, args, target, result, report)
            return 0

        logger.info("Includes folder: %s", folder)
        recursive = index_cfg.recursive if args.recursive is None else args.recursive
        file_index = build_file_index(
            folder,
            recursive=recursive,
            include_hidden=index_cfg.include_hidden,
        )

        preprocessor = Preprocessor.from_config(
            file_index, variables, repo_root=repo_root, config=config
        )
        result, report = preprocessor.process(text, document=str(target))
        logger.info(report.summary())

        emit_result(formatter, args, target, result, report)
        return 0
    except (PowerUpsError, OSError) as e:
        formatter.error(e, error_code="expand_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
