"""Expansion output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from md2folder.schemas.documents import SplitDocument


class ExpansionResult(BaseModel):
    """Outcome of expanding a source file into a folder."""

    source: Path
    folder: Path
    files: list[Path] = Field(default_factory=list)
    documents: list[SplitDocument] = Field(default_factory=list)
    dry_run: bool = False
