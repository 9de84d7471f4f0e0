"""Cleanup utilities for the output directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import OutputIsFileError


def check_output_target(path: Path) -> None:
    """Raise ``OutputIsFileError`` when ``path`` exists but is not a directory."""

    if path.exists() and not path.is_dir():
        raise OutputIsFileError(path)


def clear_directory(directory: Path) -> None:
    """Delete every entry beneath ``directory`` but keep the directory itself.

    Symbolic links are unlinked, never followed.
    """

    for entry in tuple(directory.iterdir()):
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def prepare_output_dir(path: Path) -> None:
    """Ensure ``path`` is an empty directory, creating it when absent."""

    check_output_target(path)
    if path.is_dir():
        clear_directory(path)
    else:
        path.mkdir(parents=True, exist_ok=True)
