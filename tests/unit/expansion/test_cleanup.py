from __future__ import annotations

from powerups.core.expansion import RegionCleaner, cleanup, closing_marker, opening_marker


def _region(name: str, region_id: str, body: str, indent: str = "    ") -> str:
    return (
        f"\n{indent}{opening_marker(name, region_id)}\n"
        f"{body}"
        f"\n{indent}{closing_marker(name, region_id)}\n"
    )


class TestMarkers:
    def test_marker_format(self) -> None:
        assert opening_marker("a.xml", "ID1") == '<!-- included "a.xml" "ID1" -->'
        assert closing_marker("a.xml", "ID1") == '<!-- / included "a.xml" "ID1" -->'


class TestCleanup:
    def test_text_without_markers_is_unchanged(self) -> None:
        text = '<root>\n    <!-- include "a.xml" -->\n</root>'

        assert cleanup(text) == text

    def test_removes_region_after_directive(self) -> None:
        original = '<root>\n    <!-- include "a.xml" -->\n</root>'
        expanded = original.replace(
            "-->\n", "-->" + _region("a.xml", "ID1", "\n      <block/>") + "\n", 1
        )

        assert cleanup(expanded) == original

    def test_removes_several_regions(self) -> None:
        original = '<!-- include "a.xml" -->\n<!-- include "b.xml" -->\n'
        expanded = (
            '<!-- include "a.xml" -->'
            + _region("a.xml", "ID1", "\n  <a/>", indent="")
            + '\n<!-- include "b.xml" -->'
            + _region("b.xml", "ID2", "\n  <b/>", indent="")
            + "\n"
        )

        assert cleanup(expanded) == original

    def test_opening_without_matching_closing_is_left(self) -> None:
        text = 'x\n<!-- included "a.xml" "ID1" -->\nbody\n<!-- / included "a.xml" "OTHER" -->\n'

        assert cleanup(text) == text

    def test_idempotent(self) -> None:
        expanded = '<!-- include "a.xml" -->' + _region("a.xml", "ID1", "\n  <a/>") + "tail"

        once = cleanup(expanded)

        assert cleanup(once) == once
        assert once == '<!-- include "a.xml" -->tail'

    def test_reports_removed_regions(self) -> None:
        expanded = "head" + _region("a.xml", "ID1", "\n  <a/>") + "tail"

        result, removed = RegionCleaner().clean_with_regions(expanded)

        assert result == "headtail"
        assert len(removed) == 1
        assert removed[0].name == "a.xml"
        assert removed[0].region_id == "ID1"
        assert expanded[removed[0].start:removed[0].end] == _region("a.xml", "ID1", "\n  <a/>")

    def test_leading_blank_lines_of_document_are_removed_with_region(self) -> None:
        expanded = _region("a.xml", "ID1", "\n  <a/>", indent="")

        assert cleanup(expanded) == ""
