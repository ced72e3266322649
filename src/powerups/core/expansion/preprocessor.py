"""Preprocessor facade: cleanup followed by expansion.

Usage:
    preprocessor = Preprocessor(build_file_index("includes"), {"variable": "Hello"})
    result, report = preprocessor.process(text)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .cleanup import RegionCleaner
from .engine import DEFAULT_MAX_DEPTH, DEFAULT_NESTING_INDENT, IncludeExpander
from .index import EMPTY_INDEX, FileIndex
from .report import ExpansionReport

logger = logging.getLogger(__name__)


class Preprocessor:
    """Strip previously generated regions, then expand include directives."""

    def __init__(
        self,
        file_index: Optional[FileIndex] = None,
        variables: Optional[Mapping[str, str]] = None,
        *,
        nesting_indent: str = DEFAULT_NESTING_INDENT,
        max_depth: int = DEFAULT_MAX_DEPTH,
        **expander_options: Any,
    ) -> None:
        """Initialize the preprocessor.

        Args:
            file_index: Include name -> path mapping (empty when omitted)
            variables: Global variables visible to every directive
            nesting_indent: Extra indentation for included lines
            max_depth: Include depth that raises CircularIncludeError
            **expander_options: Passed through to IncludeExpander
                (read_file, load_variables, id_factory, ...)
        """
        self.file_index = file_index if file_index is not None else EMPTY_INDEX
        self.variables: Dict[str, str] = dict(variables or {})
        self.cleaner = RegionCleaner()
        self.expander = IncludeExpander(
            self.file_index,
            nesting_indent=nesting_indent,
            max_depth=max_depth,
            **expander_options,
        )

    @classmethod
    def from_config(
        cls,
        file_index: Optional[FileIndex] = None,
        variables: Optional[Mapping[str, str]] = None,
        *,
        repo_root: Optional[Path] = None,
        config: Optional[Dict[str, Any]] = None,
        **expander_options: Any,
    ) -> "Preprocessor":
        """Build a preprocessor using the ``expansion`` configuration section."""
        from powerups.core.config import ExpansionConfig

        cfg = ExpansionConfig(repo_root, config=config)
        return cls(
            file_index,
            variables,
            nesting_indent=cfg.nesting_indent,
            max_depth=cfg.max_depth,
            **expander_options,
        )

    def cleanup(self, text: str, report: Optional[ExpansionReport] = None) -> str:
        """Remove generated regions from ``text``."""
        result, removed = self.cleaner.clean_with_regions(text)
        if report is not None:
            report.regions_removed += len(removed)
        return result

    def process(self, text: str, document: str = "<memory>") -> tuple[str, ExpansionReport]:
        """Clean then expand ``text``.

        Args:
            text: Document to process
            document: Name used in the report

        Returns:
            Tuple of (expanded text, report)

        Raises:
            IncludeNotFoundError: If an include or variables name is not indexed
            VariablesParseError: If a variables file is malformed
            CircularIncludeError: If includes nest too deeply
            OSError: If an include file cannot be read
        """
        report = ExpansionReport(document=document)
        cleaned = self.cleanup(text, report)
        result = self.expander.expand(cleaned, self.variables, report=report)
        logger.debug(report.summary())
        return result, report


def process(
    text: str,
    file_index: FileIndex,
    variables: Optional[Mapping[str, str]] = None,
) -> str:
    """Clean then expand ``text`` with the default settings."""
    result, _ = Preprocessor(file_index, variables).process(text)
    return result


__all__ = ["Preprocessor", "process"]
