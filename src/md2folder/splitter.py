"""Split a Markdown document into one document per level-1 section."""

from __future__ import annotations

import logging
from typing import Literal, get_args

from md2folder.config import MD2FOLDER_LEADING_CONTENT
from md2folder.exceptions import LeadingContentError
from md2folder.markdown import build_parser, parse_markdown, render_blocks, render_title
from md2folder.schemas import SplitDocument
from md2folder.sections import group_sections

logger = logging.getLogger(__name__)

LeadingContentPolicy = Literal["discard", "reject"]
LEADING_CONTENT_POLICIES: tuple[str, ...] = get_args(LeadingContentPolicy)


def split_markdown(
    text: str, *, leading_content: LeadingContentPolicy | str = MD2FOLDER_LEADING_CONTENT
) -> list[SplitDocument]:
    """Split ``text`` at its level-1 headings.

    Each level-1 heading opens a new document. Its inline content becomes the
    document title and every block up to the next level-1 heading becomes the
    body, with nested headings moved one level up. Documents come back in
    source order; identical titles are kept as separate documents.

    Args:
        text: Markdown source.
        leading_content: What to do with blocks before the first level-1
            heading. "discard" drops them, "reject" raises.

    Returns:
        One SplitDocument per level-1 heading. Empty when there are none.

    Raises:
        ParseError: If the Markdown parser rejects the input.
        LeadingContentError: If leading_content is "reject" and content
            precedes the first level-1 heading.
        ValueError: If leading_content is not a known policy.
    """
    if leading_content not in LEADING_CONTENT_POLICIES:
        raise ValueError(
            f"Unknown leading content policy {leading_content!r}; "
            f"expected one of {', '.join(LEADING_CONTENT_POLICIES)}"
        )

    parser = build_parser()
    parsed = parse_markdown(text, parser=parser)
    grouped = group_sections(parsed.blocks)

    if grouped.leading:
        count = len(grouped.leading)
        if leading_content == "reject":
            raise LeadingContentError(
                f"Found {count} block(s) before the first level-1 heading"
            )
        logger.debug("Discarding %d block(s) before the first level-1 heading", count)

    return [
        SplitDocument(
            title=render_title(section.anchor, parsed.references, parser=parser),
            content=render_blocks(section.blocks, parsed.references, parser=parser),
        )
        for section in grouped.sections
    ]
