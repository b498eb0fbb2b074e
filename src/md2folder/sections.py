"""Group top-level blocks into sections anchored by level-1 headings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable

from md2folder.markdown import Block


@dataclass(frozen=True)
class Section:
    """A level-1 heading and the blocks that follow it."""

    anchor: Block
    blocks: tuple[Block, ...] = ()

    def append(self, block: Block) -> Section:
        return Section(anchor=self.anchor, blocks=(*self.blocks, block))


@dataclass(frozen=True)
class SectionAccumulator:
    """State carried through the fold over a document's blocks.

    Attributes:
        finished: Sections closed by a later level-1 heading.
        current: The section still collecting blocks, if any.
        leading: Blocks seen before the first level-1 heading.
    """

    finished: tuple[Section, ...] = ()
    current: Section | None = None
    leading: tuple[Block, ...] = ()

    @property
    def sections(self) -> tuple[Section, ...]:
        """All sections, with the open one closed."""
        if self.current is None:
            return self.finished
        return (*self.finished, self.current)


def is_anchor(block: Block) -> bool:
    return block.is_heading and block.level == 1


def step(acc: SectionAccumulator, block: Block) -> SectionAccumulator:
    """Fold one block into the accumulator and return the new state."""
    if is_anchor(block):
        return replace(acc, finished=acc.sections, current=Section(anchor=block))
    if acc.current is None:
        return replace(acc, leading=(*acc.leading, block))
    return replace(acc, current=acc.current.append(block.demoted()))


def group_sections(blocks: Iterable[Block]) -> SectionAccumulator:
    """Run the fold over ``blocks`` from an empty accumulator."""
    return reduce(step, blocks, SectionAccumulator())
