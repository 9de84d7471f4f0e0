"""High-level orchestration for a conversion run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .cleanup import check_output_target, prepare_output_dir
from .discovery import enumerate_sources
from .document import read_document
from .errors import InvalidInputError
from .formats import html as html_format
from .models import Invocation, RenderedPage, RenderOptions, SourceFile


@dataclass(slots=True)
class ConversionSummary:
    """Represents the outputs of convert for callers."""

    output_dir: Path
    pages: List[RenderedPage] = field(default_factory=list)


def _report(page: RenderedPage) -> None:
    print(f"Processed: {page.source.name} -> {page.output_path}")


def _guard_overlap(sources: Sequence[SourceFile], output_dir: Path) -> None:
    """Refuse sources that clearing ``output_dir`` would delete."""

    resolved_output = output_dir.resolve()
    for source in sources:
        if source.path.resolve().is_relative_to(resolved_output):
            raise InvalidInputError(
                source.path,
                f"source lies inside output directory {output_dir}",
            )


def convert_file(
    source: SourceFile,
    output_dir: Path,
    options: Optional[RenderOptions] = None,
) -> RenderedPage:
    """Read, render, and write one source file."""

    document = read_document(source)
    payload = html_format.render_document(document, options)
    return html_format.write_page(
        payload=payload,
        dest_dir=output_dir,
        source=source,
        on_write=_report,
    )


def convert(
    invocation: Invocation,
    options: Optional[RenderOptions] = None,
) -> ConversionSummary:
    """Validate the run, prepare the output directory, and render every source.

    Nothing is deleted until both the output target and the input have been
    validated. I/O errors propagate and stop the run at the failing file.
    """

    if invocation.input_path is None:
        raise InvalidInputError(Path(""), "no input path given")

    output_dir = invocation.output_path
    check_output_target(output_dir)
    sources = enumerate_sources(invocation.input_path)
    _guard_overlap(sources, output_dir)
    prepare_output_dir(output_dir)

    summary = ConversionSummary(output_dir=output_dir)
    for source in sources:
        summary.pages.append(convert_file(source, output_dir, options))
    return summary
