# markdown_pages/markdown/blocks.py
"""
Top-level rendered blocks and the sections built from them.

A rendered document is an ordered list of blocks. Headings carry the data the
sectioner needs (level and rendered id) so it never has to re-parse markup.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class OtherBlock:
    """Any top-level element that is not a heading (paragraph, list, code...)."""

    markup: str
    spacing: str = "\n"


@dataclass(frozen=True)
class HeadingBlock:
    """A rendered h1-h6 element."""

    markup: str
    level: int
    id: str
    spacing: str = "\n"


RenderedBlock = Union[HeadingBlock, OtherBlock]


@dataclass(frozen=True)
class Section:
    """A heading-delimited run of blocks, titled by the heading's id."""

    title: str
    blocks: Tuple[RenderedBlock, ...]


def join_blocks(blocks) -> str:
    """Serialise blocks back to HTML exactly as the renderer produced them."""
    return "".join(block.markup + block.spacing for block in blocks)
