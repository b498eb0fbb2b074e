"""Tests for Markdown parsing and serialization helpers."""

from __future__ import annotations

import pytest

from md2folder.exceptions import ParseError
from md2folder.markdown import parse_markdown, render_blocks, render_title


class TestParseMarkdown:
    """Tests for parse_markdown."""

    def test_top_level_blocks(self) -> None:
        """Each top-level node becomes one block."""
        parsed = parse_markdown("# H\n\npara\n\n- a\n- b\n\n```py\nx = 1\n```\n")

        assert [block.kind for block in parsed.blocks] == [
            "heading",
            "paragraph",
            "bullet_list",
            "fence",
        ]

    def test_heading_levels(self) -> None:
        """Headings expose their level, other blocks do not."""
        parsed = parse_markdown("## Two\n\ntext\n")

        assert parsed.blocks[0].level == 2
        assert parsed.blocks[1].level is None

    def test_nested_headings_are_not_top_level(self) -> None:
        """A heading inside a block quote stays inside that block."""
        parsed = parse_markdown("> # quoted\n")

        assert [block.kind for block in parsed.blocks] == ["blockquote"]

    def test_collects_references(self) -> None:
        """Link reference definitions are kept outside the block list."""
        parsed = parse_markdown("[a]: https://example.com\n\ntext\n")

        assert len(parsed.blocks) == 1
        assert len(parsed.references) == 1

    def test_rejects_non_string(self) -> None:
        """Non-string input is a parse error."""
        with pytest.raises(ParseError, match="rejected the input"):
            parse_markdown(42)  # type: ignore[arg-type]


class TestBlock:
    """Tests for Block level changes."""

    def test_demoted_does_not_touch_original_tokens(self) -> None:
        """Demotion copies the heading tokens."""
        (block,) = parse_markdown("### Three\n").blocks

        demoted = block.demoted()

        assert demoted.level == 2
        assert block.level == 3
        assert block.tokens[0].tag == "h3"
        assert demoted.tokens[1] is block.tokens[1]

    def test_demoted_stops_at_level_one(self) -> None:
        """Level 1 is the shallowest a heading can get."""
        (block,) = parse_markdown("# One\n").blocks

        assert block.demoted().level == 1

    def test_demoted_leaves_other_blocks(self) -> None:
        """Non-heading blocks are returned unchanged."""
        (block,) = parse_markdown("text\n").blocks

        assert block.demoted() is block

    def test_with_level_requires_heading(self) -> None:
        """Only headings have a level to set."""
        (block,) = parse_markdown("text\n").blocks

        with pytest.raises(ValueError, match="paragraph"):
            block.with_level(2)


class TestRender:
    """Tests for render_blocks and render_title."""

    def test_render_empty(self) -> None:
        """No blocks render as an empty document."""
        assert render_blocks(()) == ""

    def test_blocks_are_separated_by_blank_lines(self) -> None:
        """Rendered blocks end with a single newline."""
        parsed = parse_markdown("## Head\ntext\n")

        assert render_blocks(parsed.blocks) == "## Head\n\ntext\n"

    def test_html_passes_through(self) -> None:
        """Raw HTML blocks are kept verbatim."""
        parsed = parse_markdown("<div>raw</div>\n")

        assert render_blocks(parsed.blocks) == "<div>raw</div>\n"

    def test_render_title_of_deep_heading(self) -> None:
        """Titles are rendered as if the heading were level 1."""
        (block,) = parse_markdown("#### Deep *title*\n").blocks

        assert render_title(block) == "Deep *title*"
