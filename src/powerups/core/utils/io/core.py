"""Core I/O utilities for powerups.

Text file read/write helpers and directory management used by the CLI,
the file index and the variables loader.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from powerups.core.exceptions import FileDecodeError

PathLike = Union[str, Path]


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def ensure_directory(path: PathLike, create: bool = True) -> Path:
    """Ensure directory exists.

    Args:
        path: Directory path to check/create
        create: If True, create directory if missing; if False, raise if missing

    Returns:
        Path: The directory path

    Raises:
        FileNotFoundError: If create=False and directory doesn't exist
        NotADirectoryError: If path exists but is not a directory
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path

    if create:
        path.mkdir(parents=True, exist_ok=True)
        return path
    raise FileNotFoundError(f"Directory does not exist: {path}")


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
        FileDecodeError: If the file is not valid UTF-8
        Other I/O errors are propagated to callers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileDecodeError(str(path), exc.reason) from exc


def write_text(path: PathLike, content: str) -> None:
    """Write UTF-8 text to ``path``, creating the parent directory if needed."""
    target = Path(path)
    ensure_parent_dir(target)
    target.write_text(content, encoding="utf-8")


def list_files(
    directory: PathLike,
    *,
    recursive: bool = False,
    include_hidden: bool = False,
) -> List[Tuple[str, Path]]:
    """List regular files under ``directory`` as ``(base name, path)`` pairs.

    Entries are returned in sorted path order. Hidden files (and, when
    recursing, hidden directories) are skipped unless ``include_hidden``.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    root = ensure_directory(directory, create=False)
    candidates = sorted(root.rglob("*")) if recursive else sorted(root.iterdir())

    files: List[Tuple[str, Path]] = []
    for path in candidates:
        if not include_hidden:
            rel_parts = path.relative_to(root).parts
            if any(part.startswith(".") for part in rel_parts):
                continue
        if path.is_file():
            files.append((path.name, path))
    return files


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "read_text",
    "write_text",
    "list_files",
]
