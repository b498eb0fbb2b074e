"""Split document model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SplitDocument(BaseModel):
    """One document produced from a top-level section.

    Attributes:
        title: Inline markdown of the anchoring heading, without the ``#`` marker.
        content: Markdown body of the section with headings demoted one level.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
