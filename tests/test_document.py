"""Tests for htmlpages.document: line splitting and title extraction."""

from __future__ import annotations

from pathlib import Path

from htmlpages.document import build_document, read_document, split_lines
from htmlpages.models import SourceFile, stem_of


# ── split_lines ─────────────────────────────────────────────────────


class TestSplitLines:
    def test_empty_text_has_no_lines(self) -> None:
        assert split_lines("") == []

    def test_trailing_newline_adds_no_line(self) -> None:
        assert split_lines("Hello\n") == ["Hello"]

    def test_missing_trailing_newline(self) -> None:
        assert split_lines("a\nb") == ["a", "b"]

    def test_mixed_terminators(self) -> None:
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_blank_lines_are_kept(self) -> None:
        assert split_lines("a\n\n\nb\n") == ["a", "", "", "b"]

    def test_only_newline_is_one_blank_line(self) -> None:
        assert split_lines("\n") == [""]


# ── build_document ──────────────────────────────────────────────────


class TestBuildDocument:
    def test_explicit_title(self) -> None:
        doc = build_document(
            ["My Title", "", "", "first", "", "second"], "note"
        )
        assert doc.has_explicit_title is True
        assert doc.title == "My Title"
        assert doc.body == ["first", "", "second"]

    def test_title_with_empty_body(self) -> None:
        doc = build_document(["Only", "", ""], "x")
        assert doc.has_explicit_title is True
        assert doc.body == []

    def test_single_blank_after_first_line_is_not_a_title(self) -> None:
        lines = ["Heading", "", "text"]
        doc = build_document(lines, "stem")
        assert doc.has_explicit_title is False
        assert doc.title == "stem"
        assert doc.body == lines

    def test_fewer_than_three_lines_use_stem(self) -> None:
        doc = build_document(["a", ""], "stem")
        assert doc.has_explicit_title is False
        assert doc.body == ["a", ""]

    def test_whitespace_only_lines_are_not_empty(self) -> None:
        doc = build_document(["T", " ", ""], "stem")
        assert doc.has_explicit_title is False


# ── read_document / stems ───────────────────────────────────────────


def test_read_document_uses_stem_as_fallback_title(tmp_path: Path) -> None:
    path = tmp_path / "hello.txt"
    path.write_text("Hello\n", encoding="utf-8")
    doc = read_document(SourceFile(path=path))
    assert doc.title == "hello"
    assert doc.body == ["Hello"]


def test_read_document_decodes_utf8(tmp_path: Path) -> None:
    path = tmp_path / "uni.md"
    path.write_bytes("Café\n\n\nnaïve ✓\n".encode("utf-8"))
    doc = read_document(SourceFile(path=path))
    assert doc.title == "Café"
    assert doc.body == ["naïve ✓"]


def test_stem_of_removes_only_final_extension() -> None:
    assert stem_of("notes.v2.txt") == "notes.v2"
    assert stem_of("README.md") == "README"
    assert stem_of(".txt") == ".txt"
