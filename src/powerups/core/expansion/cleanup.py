"""Generated-region markers and their removal.

Every top-level expansion is wrapped as:

    <!-- included "name.xml" "<id>" -->
    ...expanded content...
    <!-- / included "name.xml" "<id>" -->

Cleanup removes each such region (plus the blank lines the expansion put in
front of it), restoring the document as it was before expansion.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def opening_marker(name: str, region_id: str) -> str:
    return f'<!-- included "{name}" "{region_id}" -->'


def closing_marker(name: str, region_id: str) -> str:
    return f'<!-- / included "{name}" "{region_id}" -->'


@dataclass(frozen=True)
class RemovedRegion:
    """A generated region removed by cleanup."""

    name: str
    region_id: str
    start: int  # Offsets in the text cleanup was given
    end: int


class RegionCleaner:
    """Remove generated regions from a document.

    Pure and idempotent: ``clean(clean(x)) == clean(x)``. An opening marker
    without its exact closing marker (same name and id) is left untouched.
    """

    OPENING_PATTERN = re.compile(r'([ \t]*)<!-- included "([^"]+)" "([^"]+)" -->')

    def clean(self, text: str) -> str:
        result, _ = self.clean_with_regions(text)
        return result

    def clean_with_regions(self, text: str) -> Tuple[str, List[RemovedRegion]]:
        """Remove generated regions, also returning what was removed."""
        parts: List[str] = []
        removed: List[RemovedRegion] = []
        cursor = 0

        for match in self.OPENING_PATTERN.finditer(text):
            if match.start() < cursor:
                continue  # Inside a region already removed

            name, region_id = match.group(2), match.group(3)
            end = self._find_region_end(text, name, region_id, match.end())
            if end is None:
                logger.debug("No closing marker for %s %s, leaving region", name, region_id)
                continue

            start = match.start()
            while start > cursor and text[start - 1] == "\n":
                start -= 1

            parts.append(text[cursor:start])
            removed.append(RemovedRegion(name=name, region_id=region_id, start=start, end=end))
            logger.info("Removed generated region %s (%s)", name, region_id)
            cursor = end

        if not removed:
            return text, removed

        parts.append(text[cursor:])
        return "".join(parts), removed

    @staticmethod
    def _find_region_end(text: str, name: str, region_id: str, search_from: int) -> Optional[int]:
        closing = closing_marker(name, region_id)
        index = text.find(closing, search_from)
        if index == -1:
            return None
        end = index + len(closing)
        # The line break written after the closing marker belongs to the region.
        if text.startswith("\n", end):
            end += 1
        return end


_default_cleaner = RegionCleaner()


def cleanup(text: str) -> str:
    """Strip every generated region from ``text``."""
    return _default_cleaner.clean(text)


__all__ = [
    "opening_marker",
    "closing_marker",
    "RemovedRegion",
    "RegionCleaner",
    "cleanup",
]
