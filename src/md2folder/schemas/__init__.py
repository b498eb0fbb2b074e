"""Shared schemas for md2folder."""

from md2folder.schemas.documents import SplitDocument
from md2folder.schemas.expansion import ExpansionResult

__all__ = ["ExpansionResult", "SplitDocument"]
