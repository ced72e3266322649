"""Recursive include expansion.

For each ``<!-- include ... -->`` directive the engine:
1. parses its parameters (no ``include`` -> skipped),
2. builds the local scope (inherited + inline bindings + variables file),
3. resolves the include name through the file index (missing -> error),
4. evaluates the ``where`` guard (unequal sides -> skipped),
5. reads the file and substitutes the local scope into it,
6. recurses into the included content with the local scope,
7. re-indents it under the directive and, at top level only, wraps it in
   generated-region markers,
8. emits it right after the directive comment, which stays in place.
"""
from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional

from powerups.core.exceptions import CircularIncludeError, IncludeNotFoundError
from powerups.core.utils.io import read_text

from .cleanup import closing_marker, opening_marker
from .directives import DirectiveMatch, DirectiveParser
from .index import FileIndex
from .loader import load_variables_file
from .report import ExpansionReport
from .variables import VariableResolver, merge_scopes

logger = logging.getLogger(__name__)

DEFAULT_NESTING_INDENT = "  "
DEFAULT_MAX_DEPTH = 64


def new_unique_id() -> str:
    return str(uuid.uuid4()).upper()


class IncludeExpander:
    """Expand include directives against a file index.

    Usage:
        expander = IncludeExpander(build_file_index("includes"))
        result = expander.expand(text, {"variable": "Hello"})
    """

    def __init__(
        self,
        file_index: FileIndex,
        *,
        read_file: Callable[[Path], str] = read_text,
        load_variables: Callable[[Path], Dict[str, str]] = load_variables_file,
        id_factory: Callable[[], str] = new_unique_id,
        nesting_indent: str = DEFAULT_NESTING_INDENT,
        max_depth: int = DEFAULT_MAX_DEPTH,
        parser: Optional[DirectiveParser] = None,
        resolver: Optional[VariableResolver] = None,
    ) -> None:
        self.file_index = file_index
        self.read_file = read_file
        self.load_variables = load_variables
        self.id_factory = id_factory
        self.nesting_indent = nesting_indent
        self.max_depth = max_depth
        self.parser = parser or DirectiveParser()
        self.resolver = resolver or VariableResolver()

    def expand(
        self,
        text: str,
        variables: Optional[Mapping[str, str]] = None,
        *,
        nested: bool = False,
        report: Optional[ExpansionReport] = None,
    ) -> str:
        """Expand every directive in ``text``.

        Args:
            text: Document (or included content) to expand
            variables: Scope inherited by every directive in ``text``
            nested: True when ``text`` is itself included content; nested
                expansions are not wrapped in region markers
            report: Optional report collecting diagnostics

        Returns:
            Expanded text

        Raises:
            IncludeNotFoundError: If an include or variables name is not indexed
            CircularIncludeError: If includes nest deeper than ``max_depth``
        """
        return self._expand(
            text,
            dict(variables or {}),
            nested=nested,
            chain=[],
            report=report if report is not None else ExpansionReport(),
        )

    def _expand(
        self,
        text: str,
        variables: Dict[str, str],
        *,
        nested: bool,
        chain: List[str],
        report: ExpansionReport,
    ) -> str:
        matches = self.parser.find(text)
        if not matches:
            return text

        # Positions are captured up front; the output is rebuilt in one pass.
        parts: List[str] = []
        cursor = 0
        for match in matches:
            parts.append(text[cursor:match.end])
            cursor = match.end
            replacement = self._expand_directive(
                match, variables, nested=nested, chain=chain, report=report
            )
            if replacement:
                parts.append(replacement)
        parts.append(text[cursor:])
        return "".join(parts)

    def _expand_directive(
        self,
        match: DirectiveMatch,
        variables: Dict[str, str],
        *,
        nested: bool,
        chain: List[str],
        report: ExpansionReport,
    ) -> Optional[str]:
        params = self.parser.parse(match.params_text)
        file_name = params.include
        if file_name is None:
            logger.debug("Skipping directive without include: %s", match.text)
            report.record_skip(match.text, "missing-include")
            return None

        local = merge_scopes(variables, params.bindings)
        if params.variables_file is not None:
            local = merge_scopes(local, self._load_variables(params.variables_file, report))

        logger.info(
            "Include file: %s%s",
            file_name,
            f" vars: {params.variables_file}" if params.variables_file else "",
        )

        file_path = self.file_index.get(file_name)
        if file_path is None:
            raise IncludeNotFoundError(file_name, context={"directive": match.text})

        if not self._condition_holds(params.where, match, report):
            logger.debug("Condition false, skipping %s: %s", file_name, params.where)
            report.record_skip(match.text, "condition-false")
            return None

        depth = len(chain) + 1
        if depth > self.max_depth:
            raise CircularIncludeError(chain + [file_name], self.max_depth)
        report.record_include(file_name, depth)

        content = self.read_file(file_path)
        content = self.resolver.apply(content, local)
        try:
            content = self._expand(
                content, local, nested=True, chain=chain + [file_name], report=report
            )
        except CircularIncludeError:
            raise
        except RecursionError as exc:
            # Interpreter stack exhausted before max_depth was reached.
            raise CircularIncludeError(chain + [file_name], self.max_depth) from exc

        prefix = match.indent + self.nesting_indent
        replacement = "\n" + "\n".join(prefix + line for line in content.split("\n"))

        if not nested:
            region_id = self.id_factory()
            replacement = (
                f"\n{match.indent}{opening_marker(file_name, region_id)}\n"
                f"{replacement}"
                f"\n{match.indent}{closing_marker(file_name, region_id)}\n"
            )
            report.regions_inserted += 1

        return replacement

    def _load_variables(self, name: str, report: ExpansionReport) -> Dict[str, str]:
        path = self.file_index.get(name)
        if path is None:
            raise IncludeNotFoundError(name, kind="variables")
        report.record_variables_file(name)
        return self.load_variables(path)

    @staticmethod
    def _condition_holds(
        condition: Optional[str],
        match: DirectiveMatch,
        report: ExpansionReport,
    ) -> bool:
        """Evaluate a ``left==right`` guard; anything else always holds."""
        if condition is None:
            return True
        if "==" not in condition:
            report.add_warning(f"Ignoring where condition without '==': {condition!r} in {match.text}")
            return True
        left, right = condition.split("==", 1)
        return left.strip() == right.strip()


__all__ = [
    "DEFAULT_NESTING_INDENT",
    "DEFAULT_MAX_DEPTH",
    "new_unique_id",
    "IncludeExpander",
]
