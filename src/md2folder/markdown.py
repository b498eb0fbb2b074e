"""Parse Markdown into top-level blocks and serialize blocks back to Markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

try:
    from mdformat.renderer import MDRenderer
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "mdformat is required for Markdown serialization (pip install mdformat)."
    ) from exc

from md2folder.exceptions import ParseError

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

_BYTE_ORDER_MARK = "\ufeff"

# Keep line breaks as written and keep ordered list numbering from the source.
_MDFORMAT_OPTIONS = {"wrap": "keep", "number": True}


@dataclass(frozen=True)
class Block:
    """A top-level block node, held as the run of tokens that spans it."""

    tokens: tuple[Token, ...]

    @property
    def kind(self) -> str:
        opening = self.tokens[0].type
        if opening.endswith("_open"):
            return opening[: -len("_open")]
        return opening

    @property
    def is_heading(self) -> bool:
        return self.kind == "heading"

    @property
    def level(self) -> int | None:
        """Heading level (1-6), or None for anything that is not a heading."""
        if not self.is_heading:
            return None
        return int(self.tokens[0].tag[1:])

    def with_level(self, level: int) -> Block:
        """Return a copy of this heading rendered as an ATX heading of ``level``.

        The original tokens are left untouched; only the opening and closing
        tokens are copied.
        """
        if not self.is_heading:
            raise ValueError(f"Cannot set a heading level on a {self.kind} block")
        level = min(max(level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)
        changes = {"tag": f"h{level}", "markup": "#" * level}
        opening, *inner, closing = self.tokens
        return Block((opening.copy(**changes), *inner, closing.copy(**changes)))

    def demoted(self) -> Block:
        """Move a heading one level up the outline, never past level 1.

        Blocks that are not headings are returned as-is.
        """
        if not self.is_heading:
            return self
        return self.with_level(self.level - 1)


@dataclass(frozen=True)
class ParsedMarkdown:
    """Top-level blocks of a document plus its link reference definitions."""

    blocks: tuple[Block, ...]
    references: Mapping[str, Any] = field(default_factory=dict)


def build_parser() -> MarkdownIt:
    """Create a CommonMark parser whose renderer writes Markdown back out."""
    md = MarkdownIt("commonmark", {"store_labels": True}, renderer_cls=MDRenderer)
    md.options["mdformat"] = dict(_MDFORMAT_OPTIONS)
    md.options["parser_extension"] = []
    md.options["codeformatters"] = {}
    return md


def parse_markdown(text: str, *, parser: MarkdownIt | None = None) -> ParsedMarkdown:
    """Parse ``text`` and return its top-level blocks in source order.

    Raises:
        ParseError: If the parser rejects the input.
    """
    md = parser or build_parser()
    env: dict[str, Any] = {}
    if isinstance(text, str):
        # A byte order mark would turn a heading on the first line into text.
        text = text.removeprefix(_BYTE_ORDER_MARK)
    try:
        tokens = md.parse(text, env)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Markdown parser rejected the input: {exc}") from exc

    root = SyntaxTreeNode(tokens)
    blocks = tuple(Block(tuple(node.to_tokens())) for node in root.children)
    return ParsedMarkdown(blocks=blocks, references=env.get("references", {}))


def render_blocks(
    blocks: Iterable[Block],
    references: Mapping[str, Any] | None = None,
    *,
    parser: MarkdownIt | None = None,
) -> str:
    """Serialize blocks as a standalone Markdown document.

    Reference definitions used by the blocks are appended at the end, so the
    output resolves its links on its own. An empty block sequence renders as "".
    """
    md = parser or build_parser()
    tokens = [token for block in blocks for token in block.tokens]
    env: dict[str, Any] = {"references": dict(references or {})}
    return md.renderer.render(tokens, md.options, env)


def render_title(
    heading: Block,
    references: Mapping[str, Any] | None = None,
    *,
    parser: MarkdownIt | None = None,
) -> str:
    """Render a heading's inline content as it reads inside a level-1 heading."""
    rendered = render_blocks([heading.with_level(1)], references, parser=parser)
    heading_line = rendered.split("\n", 1)[0]
    return heading_line.removeprefix("#").strip()
