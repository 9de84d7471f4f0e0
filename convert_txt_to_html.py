"""Command-line front-end that converts .txt and .md files into HTML pages."""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import Optional, Sequence

from config_loader import ConfigError, resolve_runtime_settings
from htmlpages import (
    DEFAULT_OUTPUT_DIR,
    ConversionError,
    Invocation,
    RenderOptions,
    convert,
)

PROG = "convertTxtToHtml"
VERSION = "0.1"

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")
OUTPUT_FLAGS = ("-o", "--output")

EXIT_OK = 0
EXIT_IO_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Describe the accepted options; used to produce the help text."""

    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] <input>",
        description="Convert .txt and .md files into minimal HTML pages.",
        add_help=False,
    )
    parser.add_argument(
        "input", help="Input .txt/.md file or a directory containing them."
    )
    parser.add_argument(
        *HELP_FLAGS, action="store_true", help="Print this help message."
    )
    parser.add_argument(
        *VERSION_FLAGS,
        action="store_true",
        help="Print version information.",
    )
    parser.add_argument(
        *OUTPUT_FLAGS,
        metavar="<dir>",
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    return parser


def print_help() -> None:
    print(build_parser().format_help(), end="")


def version_string() -> str:
    return f"{PROG} version {VERSION}"


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Interpret ``argv`` positionally.

    The first argument selects help, version, or the input path. An output
    directory is only taken from ``<input> -o <dir>``; any other trailing
    arguments fall back to the default output directory.
    """

    if not argv or argv[0] in HELP_FLAGS:
        return Invocation(mode="help")
    if argv[0] in VERSION_FLAGS:
        return Invocation(mode="version")

    invocation = Invocation(mode="convert", input_path=Path(argv[0]))
    if len(argv) >= 3 and argv[1] in OUTPUT_FLAGS:
        invocation.output_path = Path(argv[2])
        invocation.output_given = True
    return invocation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``convertTxtToHtml`` CLI."""

    args = list(sys.argv[1:] if argv is None else argv)
    invocation = parse_invocation(args)
    if invocation.mode == "help":
        print_help()
        return EXIT_OK
    if invocation.mode == "version":
        print(version_string())
        return EXIT_OK

    try:
        settings = resolve_runtime_settings()
    except ConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if not invocation.output_given:
        invocation.output_path = Path(settings["output_dir"])
    options = RenderOptions(escape_html=settings["escape_html"])

    try:
        summary = convert(invocation, options)
    except ConversionError as exc:
        print(str(exc), file=sys.stderr)
        print_help()
        return EXIT_USAGE
    except (OSError, UnicodeDecodeError):
        traceback.print_exc()
        return EXIT_IO_FAILURE

    if summary.pages:
        print(
            f"✅ Converted {len(summary.pages)} file(s) into"
            f" {summary.output_dir}"
        )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
