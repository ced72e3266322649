from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from powerups.core.utils.io import ensure_directory, list_files, read_text, read_yaml, write_text
from powerups.core.utils.merge import deep_merge
from powerups.core.exceptions import FileDecodeError
from powerups.data import get_data_path
from powerups.data import read_yaml as read_data_yaml


def test_write_text_creates_parent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b.txt"

    write_text(target, "héllo")

    assert read_text(target) == "héllo"


def test_read_text_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Text file not found"):
        read_text(tmp_path / "missing.txt")


def test_read_text_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.xml"
    path.write_bytes("caf\u00e9".encode("latin-1"))

    with pytest.raises(FileDecodeError) as exc_info:
        read_text(path)

    assert exc_info.value.path == str(path)
    assert str(path) in str(exc_info.value)


def test_ensure_directory_without_create(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ensure_directory(tmp_path / "missing", create=False)
    assert ensure_directory(tmp_path / "made").is_dir()


def test_ensure_directory_rejects_file(tmp_path: Path) -> None:
    path = tmp_path / "file"
    path.write_text("", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        ensure_directory(path)


def test_list_files_sorted_regular_files(tmp_path: Path) -> None:
    (tmp_path / "b.xml").write_text("", encoding="utf-8")
    (tmp_path / "a.xml").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()

    assert [name for name, _ in list_files(tmp_path)] == ["a.xml", "b.xml"]


def test_read_yaml_default_and_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [", encoding="utf-8")

    assert read_yaml(tmp_path / "missing.yaml", default={}) == {}
    assert read_yaml(bad, default={"x": 1}) == {"x": 1}
    with pytest.raises(yaml.YAMLError):
        read_yaml(bad, raise_on_error=True)


def test_deep_merge_nested() -> None:
    base = {"a": 1, "b": {"c": 2}}

    assert deep_merge(base, {"b": {"d": 3}}) == {"a": 1, "b": {"c": 2, "d": 3}}
    assert base == {"a": 1, "b": {"c": 2}}


def test_bundled_data() -> None:
    assert get_data_path("config", "defaults.yaml").is_file()
    assert get_data_path("schemas", "variables.schema.yaml").is_file()
    assert read_data_yaml("schemas", "variables.schema.yaml")["type"] == "object"
