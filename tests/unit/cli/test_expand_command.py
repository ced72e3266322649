from __future__ import annotations

import json
from pathlib import Path

import pytest

from powerups.cli import SEPARATOR
from powerups.cli._dispatcher import main

SOURCE = '<root>\n    <!-- include "block.xml" -->\n</root>'


@pytest.fixture
def document(project_root: Path) -> Path:
    path = project_root / "doc.xml"
    path.write_text(SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def includes(project_root: Path, write_files) -> Path:
    folder = project_root / "includes"
    write_files(folder, {"block.xml": "<block>${variable}</block>", "vars.json": '{"variable": "Hi"}'})
    return folder


class TestExpandCommand:
    def test_prints_separator_and_result(
        self, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        rc = main(["expand", str(document), "--includes-folder", str(includes)])

        out = capsys.readouterr().out
        assert rc == 0
        assert out.startswith(SEPARATOR + "\n")
        assert "<block>${variable}</block>" in out
        assert document.read_text(encoding="utf-8") == SOURCE

    def test_json_output(self, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        variables = includes / "vars.json"

        rc = main(
            ["expand", str(document), "--includes-folder", str(includes), "--variables", str(variables), "--json"]
        )

        payload = json.loads(capsys.readouterr().out)
        assert rc == 0
        assert payload["status"] == "success"
        assert payload["overwritten"] is False
        assert "<block>Hi</block>" in payload["content"]
        assert payload["report"]["includes_resolved"] == ["block.xml"]

    def test_overwrite(self, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["expand", str(document), "--includesFolder", str(includes), "--overwrite"])

        assert rc == 0
        assert f"Overwrote {document}" in capsys.readouterr().out
        assert '<!-- included "block.xml"' in document.read_text(encoding="utf-8")

    def test_folder_from_project_config(
        self, project_root: Path, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project_root / ".powerups.yaml").write_text("index:\n  folder: includes\n", encoding="utf-8")

        rc = main(["expand", str(document), "--json"])

        assert rc == 0
        assert "<block>" in json.loads(capsys.readouterr().out)["content"]

    def test_recursive_flag(
        self, project_root: Path, document: Path, write_files, capsys: pytest.CaptureFixture[str]
    ) -> None:
        folder = project_root / "tree"
        write_files(folder, {"parts/block.xml": "<deep/>"})

        assert main(["expand", str(document), "--includes-folder", str(folder)]) == 1
        capsys.readouterr()

        rc = main(["expand", str(document), "--includes-folder", str(folder), "--recursive"])

        assert rc == 0
        assert "<deep/>" in capsys.readouterr().out

    def test_missing_include_fails(
        self, document: Path, project_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        empty = project_root / "empty"
        empty.mkdir()

        rc = main(["expand", str(document), "--includes-folder", str(empty)])

        captured = capsys.readouterr()
        assert rc == 1
        assert "block.xml not found!" in captured.err
        assert SEPARATOR not in captured.out

    def test_missing_include_json_error(
        self, document: Path, project_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        empty = project_root / "empty"
        empty.mkdir()

        rc = main(["expand", str(document), "--includes-folder", str(empty), "--json"])

        payload = json.loads(capsys.readouterr().err)
        assert rc == 1
        assert payload["error"] == "expand_error"
        assert payload["details"]["code"] == "IncludeNotFoundError"

    def test_without_folder_document_passes_through(
        self, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        rc = main(["expand", str(document), "--json"])

        captured = capsys.readouterr()
        payload = json.loads(captured.out)
        assert rc == 0
        assert payload["content"] == SOURCE
        assert payload["report"]["includes_resolved"] == []
        assert payload["report"]["warnings"]
        assert "No includes folder" in captured.err

    def test_without_folder_old_expansions_are_stripped(
        self, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["expand", str(document), "--includes-folder", str(includes), "--overwrite"]) == 0
        capsys.readouterr()

        rc = main(["expand", str(document), "--overwrite"])

        assert rc == 0
        assert document.read_text(encoding="utf-8") == SOURCE

    def test_missing_include_leaves_target_untouched(
        self, document: Path, project_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        empty = project_root / "empty"
        empty.mkdir()
        before = document.read_bytes()

        rc = main(["expand", str(document), "--includes-folder", str(empty), "--overwrite"])

        assert rc == 1
        assert document.read_bytes() == before
        assert "Overwrote" not in capsys.readouterr().out

    def test_undecodable_include_fails_cleanly(
        self, document: Path, project_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        folder = project_root / "binary"
        folder.mkdir()
        (folder / "block.xml").write_bytes(b"\xff\xfe\xfa bad")

        rc = main(["expand", str(document), "--includes-folder", str(folder)])

        err = capsys.readouterr().err
        assert rc == 1
        assert "Cannot decode" in err
        assert "block.xml" in err

    def test_undecodable_target_json_error(
        self, project_root: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = project_root / "binary.xml"
        target.write_bytes(b"<root>\xff</root>")

        rc = main(["expand", str(target), "--includes-folder", str(includes), "--json"])

        payload = json.loads(capsys.readouterr().err)
        assert rc == 1
        assert payload["details"]["code"] == "FileDecodeError"
        assert payload["details"]["context"]["path"] == str(target.resolve())

    def test_negative_max_depth_is_a_config_error(
        self, project_root: Path, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project_root / ".powerups.yaml").write_text("expansion:\n  max_depth: -1\n", encoding="utf-8")

        rc = main(["expand", str(document), "--includes-folder", str(includes)])

        assert rc == 1
        assert "max_depth" in capsys.readouterr().err

    def test_missing_target(self, project_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["expand", str(project_root / "nope.xml")])

        assert rc == 1
        assert "not found" in capsys.readouterr().err

    def test_malformed_variables(
        self, document: Path, includes: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = includes / "bad.json"
        bad.write_text("[1, 2]", encoding="utf-8")

        rc = main(["expand", str(document), "--includes-folder", str(includes), "--variables", str(bad)])

        assert rc == 1
        assert "Invalid variables" in capsys.readouterr().err
