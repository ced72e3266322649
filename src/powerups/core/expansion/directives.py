"""Include directive parsing.

Handles:
- <!-- include "name.xml" --> - Include a file from the includes folder
- <!-- include "name.xml" variables "vars.json" --> - Bind a variables file
- <!-- include "name.xml" where "${a}==b" --> - Include only when both sides match
- <!-- include "name.xml" key="value" --> - Inline variable bindings
"""
from __future__ import annotations

import re
import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Keyword parameters, each taking the token right after it as its value.
KEYWORDS = ("include", "variables", "where")


@dataclass(frozen=True)
class DirectiveMatch:
    """An include directive located in a document."""

    text: str  # Full comment text, e.g. '<!-- include "a.xml" -->'
    indent: str  # Whitespace captured right before the comment
    params_text: str  # 'include "a.xml" ...' (up to, not including, '-->')
    start: int  # Offset of the comment (after the indent)
    end: int  # Offset right after '-->'


@dataclass
class DirectiveParameters:
    """Parameters decomposed from a directive's parameter text."""

    params: Dict[str, str] = field(default_factory=dict)
    bindings: Dict[str, str] = field(default_factory=dict)

    @property
    def include(self) -> Optional[str]:
        return self.params.get("include")

    @property
    def variables_file(self) -> Optional[str]:
        return self.params.get("variables")

    @property
    def where(self) -> Optional[str]:
        return self.params.get("where")


class DirectiveParser:
    """Find include directives and parse their parameters.

    Generated-region markers (``<!-- included ... -->`` and
    ``<!-- / included ... -->``) are never matched.
    """

    DIRECTIVE_PATTERN = re.compile(r"([ \t]*)<!-- (include .*?)-->")

    def find(self, text: str) -> List[DirectiveMatch]:
        """Return every directive in ``text`` in document order."""
        matches: List[DirectiveMatch] = []
        for match in self.DIRECTIVE_PATTERN.finditer(text):
            matches.append(
                DirectiveMatch(
                    text=text[match.end(1):match.end()],
                    indent=match.group(1),
                    params_text=match.group(2),
                    start=match.end(1),
                    end=match.end(),
                )
            )
        return matches

    def parse(self, params_text: str) -> DirectiveParameters:
        """Decompose parameter text into keyword params and inline bindings.

        Never raises: malformed text degrades to whatever could be extracted.
        """
        tokens = self.tokenize(params_text)
        result = DirectiveParameters()

        for keyword in KEYWORDS:
            try:
                index = tokens.index(keyword)
            except ValueError:
                continue
            if index + 1 < len(tokens):
                result.params[keyword] = tokens[index + 1]

        for token in tokens:
            if "=" not in token:
                continue
            sides = token.split("=")
            result.bindings[sides[0]] = _strip_quotes(sides[1])

        return result

    @staticmethod
    def tokenize(params_text: str) -> List[str]:
        """Split on whitespace, keeping double-quoted runs atomic (quotes stripped)."""
        lexer = shlex.shlex(params_text.strip(), posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ""
        lexer.escape = ""
        lexer.quotes = '"'
        try:
            return list(lexer)
        except ValueError:
            # Unbalanced quotes: plain whitespace split.
            return [_strip_quotes(part) for part in params_text.split()]


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


_default_parser = DirectiveParser()


def find_directives(text: str) -> List[DirectiveMatch]:
    """Find include directives in ``text`` (see :class:`DirectiveParser`)."""
    return _default_parser.find(text)


def parse_parameters(params_text: str) -> DirectiveParameters:
    """Parse directive parameter text (see :class:`DirectiveParser`)."""
    return _default_parser.parse(params_text)


__all__ = [
    "KEYWORDS",
    "DirectiveMatch",
    "DirectiveParameters",
    "DirectiveParser",
    "find_directives",
    "parse_parameters",
]
