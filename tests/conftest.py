"""Test setup for md2folder."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_markdown() -> str:
    """Three chapters, one of them with a nested section."""
    return (
        "# Intro\n"
        "Some text.\n"
        "# Chapter One\n"
        "## Section A\n"
        "Body A.\n"
        "# Chapter Two\n"
        "Body B.\n"
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_markdown: str) -> Path:
    """The sample document written to disk as notes.md."""
    path = tmp_path / "notes.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
