from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no config override."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("CONVERT_TXT_TO_HTML_CONFIG", raising=False)
    return workdir


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, text: str, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path / "in"
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def parse_page() -> Callable[[Path], BeautifulSoup]:
    """Parse a rendered page with BeautifulSoup/lxml."""

    def _parse(path: Path) -> BeautifulSoup:
        return BeautifulSoup(path.read_text(encoding="utf-8"), "lxml")

    return _parse
