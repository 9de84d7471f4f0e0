"""Turn source text into a Document, extracting the optional title."""

from __future__ import annotations

import re
from typing import List, Sequence

from .models import Document, SourceFile

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines with their terminators removed.

    A trailing terminator does not add an empty final line.
    """

    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def build_document(lines: Sequence[str], fallback_title: str) -> Document:
    """Build a Document, using the first line as title when followed by two blanks."""

    if len(lines) >= 3 and lines[1] == "" and lines[2] == "":
        return Document(
            title=lines[0],
            has_explicit_title=True,
            body=list(lines[3:]),
        )
    return Document(
        title=fallback_title,
        has_explicit_title=False,
        body=list(lines),
    )


def read_document(source: SourceFile) -> Document:
    text = source.path.read_text(encoding="utf-8")
    return build_document(split_lines(text), source.stem)
