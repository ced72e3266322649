"""Source file index: include name -> file location.

Directives refer to files by base name only, so the includes folder is
scanned once up front and the resulting mapping is shared read-only by every
expansion in the run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from powerups.core.utils.io import PathLike, list_files

logger = logging.getLogger(__name__)

FileIndex = Mapping[str, Path]


def index_from_entries(entries: Iterable[Tuple[str, Path]]) -> FileIndex:
    """Build a read-only index from ``(base name, path)`` pairs.

    The first entry registered for a name wins.
    """
    index: Dict[str, Path] = {}
    for name, path in entries:
        # TODO: report duplicate base names instead of keeping the first one silently.
        index.setdefault(name, Path(path))
    return MappingProxyType(index)


def build_file_index(
    directory: PathLike,
    *,
    recursive: bool = False,
    include_hidden: bool = False,
) -> FileIndex:
    """Scan ``directory`` and index its files by base name.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    index = index_from_entries(
        list_files(directory, recursive=recursive, include_hidden=include_hidden)
    )
    logger.debug("Indexed %d file(s) from %s", len(index), directory)
    return index


EMPTY_INDEX: FileIndex = MappingProxyType({})


__all__ = ["FileIndex", "EMPTY_INDEX", "index_from_entries", "build_file_index"]
