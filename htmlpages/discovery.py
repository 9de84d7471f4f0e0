"""Locate the source files a conversion run should process."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

from .errors import InvalidInputError
from .models import SOURCE_EXTENSIONS, SourceFile


def is_source_name(name: str) -> bool:
    """Return True when ``name`` ends in one of the accepted suffixes."""

    return name.endswith(SOURCE_EXTENSIONS)


def enumerate_sources(input_path: Path) -> List[SourceFile]:
    """Return the source files selected by ``input_path``.

    A directory yields its direct children with an accepted suffix, in the
    order the filesystem lists them. A single accepted file yields itself.
    Anything else raises ``InvalidInputError``.
    """

    if input_path.is_dir():
        sources = [
            SourceFile(path=entry)
            for entry in input_path.iterdir()
            if entry.is_file() and is_source_name(entry.name)
        ]
        if not sources:
            print(
                f"⚠️ No .txt or .md files found in {input_path}",
                file=sys.stderr,
            )
        return sources

    if not input_path.exists():
        raise InvalidInputError(input_path, "path does not exist")
    if input_path.is_file() and is_source_name(input_path.name):
        return [SourceFile(path=input_path)]
    raise InvalidInputError(input_path, "expected a .txt or .md file")
