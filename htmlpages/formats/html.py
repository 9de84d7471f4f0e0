"""Render Documents as minimal HTML pages and write them to disk."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Callable, List, Optional

from ..models import Document, RenderedPage, RenderOptions, SourceFile

HEAD_LINES = (
    "<!doctype html>",
    '<html lang="en">',
    "<head>",
    '<meta charset="utf-8">',
)
VIEWPORT_LINE = (
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
)


def render_document(
    document: Document, options: Optional[RenderOptions] = None
) -> str:
    """Return the HTML for ``document``; the closing tag has no newline."""

    resolved = options or RenderOptions()

    def text(value: str) -> str:
        return escape(value) if resolved.escape_html else value

    lines: List[str] = list(HEAD_LINES)
    lines.append(f"<title>{text(document.title)}</title>")
    lines.append(VIEWPORT_LINE)
    lines.append("</head>")
    lines.append("<body>")
    if document.has_explicit_title:
        lines.append(f"<h1>{text(document.title)}</h1>")
    for line in document.body:
        lines.append(f"<p>{text(line)}</p>" if line else "<p></p>")
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines)


def page_path(dest_dir: Path, source: SourceFile) -> Path:
    return dest_dir / f"{source.stem}.html"


def write_page(
    *,
    payload: str,
    dest_dir: Path,
    source: SourceFile,
    on_write: Optional[Callable[[RenderedPage], None]] = None,
) -> RenderedPage:
    """Persist ``payload`` followed by a single newline, replacing any old page."""

    output_path = page_path(dest_dir, source)
    with output_path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(payload)
        handle.write("\n")
    page = RenderedPage(source=source, output_path=output_path)
    if on_write is not None:
        on_write(page)
    return page
