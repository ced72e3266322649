from __future__ import annotations

from pathlib import Path

import pytest

from powerups.core.expansion import Preprocessor, build_file_index, cleanup, process

SOURCE = '<root>\n    <!-- include "block.xml" -->\n</root>'


@pytest.fixture
def index(includes_dir: Path, write_files):
    write_files(includes_dir, {"block.xml": "<block>${variable}</block>"})
    return build_file_index(includes_dir)


class TestProcess:
    def test_expands_with_globals(self, index) -> None:
        result = process(SOURCE, index, {"variable": "Hello"})

        assert "      <block>Hello</block>" in result

    def test_reprocessing_replaces_previous_expansion(self, index) -> None:
        first = process(SOURCE, index, {"variable": "One"})
        second = process(first, index, {"variable": "Two"})

        assert "One" not in second
        assert second.count("<block>Two</block>") == 1

    def test_cleanup_restores_source(self, index) -> None:
        expanded = process(SOURCE, index, {"variable": "Hello"})

        assert cleanup(expanded) == SOURCE

    def test_report(self, index) -> None:
        result, report = Preprocessor(index, {"variable": "x"}).process(SOURCE, document="doc.xml")

        assert report.document == "doc.xml"
        assert report.includes_resolved == ["block.xml"]
        assert report.regions_inserted == 1
        assert report.regions_removed == 0

        _, second = Preprocessor(index).process(result)
        assert second.regions_removed == 1

    def test_report_serializes(self, index) -> None:
        _, report = Preprocessor(index).process(SOURCE)

        data = report.to_dict()

        assert data["includes_resolved"] == ["block.xml"]
        assert data["skipped"] == []
        assert "Includes: 1" in report.summary()

    def test_default_index_is_empty(self) -> None:
        assert Preprocessor().process("<root/>")[0] == "<root/>"


class TestFromConfig:
    def test_uses_expansion_section(self, index, project_root: Path) -> None:
        config = {"expansion": {"nesting_indent": 4, "max_depth": 3}}

        preprocessor = Preprocessor.from_config(index, repo_root=project_root, config=config)

        assert preprocessor.expander.nesting_indent == "    "
        assert preprocessor.expander.max_depth == 3

    def test_reads_project_config(self, index, project_root: Path) -> None:
        (project_root / ".powerups.yaml").write_text(
            "expansion:\n  nesting_indent: \"\\t\"\n", encoding="utf-8"
        )

        preprocessor = Preprocessor.from_config(index, repo_root=project_root)

        assert preprocessor.expander.nesting_indent == "\t"
        assert preprocessor.expander.max_depth == 64
