"""Exceptions raised while validating a conversion run."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for conversion failures that stop before any output."""


class OutputIsFileError(ConversionError):
    """Raised when the configured output path is a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Output path must be a directory, not a file: {path}"
        )
        self.path = path


class InvalidInputError(ConversionError):
    """Raised when the input is missing or not a .txt/.md source."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        message = f"Invalid input file or directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
