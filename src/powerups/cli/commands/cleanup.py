"""
powerups cleanup command.

SUMMARY: Strip generated include regions from a document
"""
from __future__ import annotations

import argparse
import logging
import sys

from powerups.cli import OutputFormatter, add_standard_flags, emit_result, get_target
from powerups.core.exceptions import PowerUpsError
from powerups.core.expansion import ExpansionReport, Preprocessor
from powerups.core.utils.io import read_text

SUMMARY = "Strip generated include regions from a document"

logger = logging.getLogger(__name__)


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        target = get_target(args)
        logger.info("File: %s", target)
        report = ExpansionReport(document=str(target))
        result = Preprocessor().cleanup(read_text(target), report)
        logger.info("Removed %d generated region(s)", report.regions_removed)

        emit_result(formatter, args, target, result, report)
        return 0
    except (PowerUpsError, OSError) as e:
        formatter.error(e, error_code="cleanup_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
