"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def _write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file():
    """Return a helper creating a file (and its parents) of a given size."""
    return _write_file


@pytest.fixture
def build_dir(tmp_path):
    """Create a small extension build with assets that should be excluded."""
    root = tmp_path / "dist" / "chrome"
    _write_file(root / "background.js", 40 * 1024)
    _write_file(root / "content" / "index.js", 120 * 1024)
    _write_file(root / "content" / "index.js.map", 900 * 1024)
    _write_file(root / "popup" / "popup.css", 3 * 1024)
    _write_file(root / "popup" / "index.html", 2 * 1024)
    _write_file(root / "icons" / "icon128.png", 700 * 1024)
    _write_file(root / "manifest.json", 1024)
    return root


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Run inside an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
