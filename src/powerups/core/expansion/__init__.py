"""Include expansion for powerups.

- directives: find ``<!-- include ... -->`` directives and parse parameters
- variables: scope merging, ``${name}`` substitution and transforms
- engine: recursive expansion with generated-region markers
- cleanup: removal of generated regions
- index: base name -> path index of the includes folder
- loader: variables files (JSON string maps)
- preprocessor: cleanup + expansion facade with a run report
"""
from __future__ import annotations

from .cleanup import RegionCleaner, RemovedRegion, cleanup, closing_marker, opening_marker
from .directives import (
    DirectiveMatch,
    DirectiveParameters,
    DirectiveParser,
    find_directives,
    parse_parameters,
)
from .engine import IncludeExpander, new_unique_id
from .index import EMPTY_INDEX, FileIndex, build_file_index, index_from_entries
from .loader import load_variables_file, validate_variables
from .preprocessor import Preprocessor, process
from .report import ExpansionReport, SkippedDirective
from .variables import (
    TransformRegistry,
    VariableResolver,
    apply_scope,
    global_transforms,
    merge_scopes,
    register_transform,
    substitute,
)

__all__ = [
    # Directives
    "DirectiveMatch",
    "DirectiveParameters",
    "DirectiveParser",
    "find_directives",
    "parse_parameters",
    # Variables
    "TransformRegistry",
    "VariableResolver",
    "apply_scope",
    "global_transforms",
    "merge_scopes",
    "register_transform",
    "substitute",
    # Engine
    "IncludeExpander",
    "new_unique_id",
    # Cleanup
    "RegionCleaner",
    "RemovedRegion",
    "cleanup",
    "opening_marker",
    "closing_marker",
    # Index and loader
    "FileIndex",
    "EMPTY_INDEX",
    "build_file_index",
    "index_from_entries",
    "load_variables_file",
    "validate_variables",
    # Facade
    "Preprocessor",
    "process",
    "ExpansionReport",
    "SkippedDirective",
]
