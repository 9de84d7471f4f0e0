"""Convert .txt and .md files into minimal HTML pages."""

from .cleanup import clear_directory, prepare_output_dir
from .discovery import enumerate_sources
from .document import build_document, read_document, split_lines
from .errors import ConversionError, InvalidInputError, OutputIsFileError
from .formats.html import render_document, write_page
from .models import (
    DEFAULT_OUTPUT_DIR,
    Document,
    Invocation,
    RenderedPage,
    RenderOptions,
    SourceFile,
)
from .pipeline import ConversionSummary, convert, convert_file

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "ConversionError",
    "ConversionSummary",
    "Document",
    "InvalidInputError",
    "Invocation",
    "OutputIsFileError",
    "RenderOptions",
    "RenderedPage",
    "SourceFile",
    "build_document",
    "clear_directory",
    "convert",
    "convert_file",
    "enumerate_sources",
    "prepare_output_dir",
    "read_document",
    "render_document",
    "split_lines",
    "write_page",
]
