"""Shared dataclasses for page conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal, Optional

DEFAULT_OUTPUT_DIR = "convertTxtToHtml"
SOURCE_EXTENSIONS = (".txt", ".md")

Mode = Literal["help", "version", "convert"]


def stem_of(name: str) -> str:
    """Return ``name`` without its final extension.

    A leading dot does not start an extension, so ``.txt`` is its own stem.
    """

    dot_index = name.rfind(".")
    if dot_index > 0:
        return name[:dot_index]
    return name


@dataclass(slots=True)
class Invocation:
    """What the user asked for on the command line."""

    mode: Mode
    input_path: Optional[Path] = None
    output_path: Path = Path(DEFAULT_OUTPUT_DIR)
    output_given: bool = False


@dataclass(slots=True)
class RenderOptions:
    """Optional knobs that control how pages are rendered."""

    escape_html: bool = False


@dataclass(slots=True)
class SourceFile:
    """A ``.txt`` or ``.md`` file selected for conversion."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return stem_of(self.path.name)


@dataclass(slots=True)
class Document:
    """The logical page derived from a source file."""

    title: str
    has_explicit_title: bool
    body: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RenderedPage:
    """Tracks which source produced which HTML file."""

    source: SourceFile
    output_path: Path
