import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'powerups' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from powerups.core.config import ENV_PREFIX  # noqa: E402
from powerups.core.stdlib_logging import reset_logging_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_powerups_env(monkeypatch: pytest.MonkeyPatch):
    """Drop POWERUPS_* overrides from the host and reset the log handler."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory that is also the working directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def includes_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "includes"
    folder.mkdir()
    return folder


@pytest.fixture
def write_files() -> Callable[[Path, Dict[str, str]], Dict[str, Path]]:
    """Write ``{relative name: content}`` under a folder, returning the paths."""

    def _write(folder: Path, files: Dict[str, str]) -> Dict[str, Path]:
        written: Dict[str, Path] = {}
        for name, content in files.items():
            path = folder / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            written[name] = path
        return written

    return _write
