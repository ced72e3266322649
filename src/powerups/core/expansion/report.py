"""Expansion reporting dataclasses.

Provides a structured report of one preprocessing run, for callers to log
or serialize.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


@dataclass(frozen=True)
class SkippedDirective:
    """A directive left unexpanded."""

    directive: str
    reason: str  # "missing-include" | "condition-false"


@dataclass
class ExpansionReport:
    """Report from a preprocessing run.

    Contains:
    - Files included and variables files loaded
    - Directives skipped, with the reason
    - Generated regions inserted and removed
    - Warnings
    """

    document: str = "<memory>"
    timestamp: datetime = field(default_factory=datetime.now)

    includes_resolved: List[str] = field(default_factory=list)
    variables_files_loaded: List[str] = field(default_factory=list)
    skipped: List[SkippedDirective] = field(default_factory=list)
    regions_inserted: int = 0
    regions_removed: int = 0
    max_depth_reached: int = 0

    warnings: List[str] = field(default_factory=list)

    def record_include(self, name: str, depth: int) -> None:
        self.includes_resolved.append(name)
        self.max_depth_reached = max(self.max_depth_reached, depth)

    def record_variables_file(self, name: str) -> None:
        self.variables_files_loaded.append(name)

    def record_skip(self, directive: str, reason: str) -> None:
        self.skipped.append(SkippedDirective(directive=directive, reason=reason))

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def has_issues(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "document": self.document,
            "timestamp": self.timestamp.isoformat(),
            "includes_resolved": list(self.includes_resolved),
            "variables_files_loaded": list(self.variables_files_loaded),
            "skipped": [{"directive": s.directive, "reason": s.reason} for s in self.skipped],
            "regions_inserted": self.regions_inserted,
            "regions_removed": self.regions_removed,
            "max_depth_reached": self.max_depth_reached,
            "warnings": list(self.warnings),
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Expansion Report: {self.document}",
            f"  Includes: {len(self.includes_resolved)} (max depth {self.max_depth_reached})",
            f"  Variables files: {len(self.variables_files_loaded)}",
            f"  Regions: {self.regions_inserted} inserted, {self.regions_removed} removed",
            f"  Skipped: {len(self.skipped)}",
        ]

        if self.warnings:
            lines.append(f"  Warnings: {len(self.warnings)}")
            for w in self.warnings[:3]:  # Show first 3
                lines.append(f"    - {w}")

        return "\n".join(lines)


__all__ = ["SkippedDirective", "ExpansionReport"]
