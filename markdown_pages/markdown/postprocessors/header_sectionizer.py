# markdown_pages/markdown/postprocessors/header_sectionizer.py
"""
Postprocessor that groups rendered blocks into heading-delimited sections.

This postprocessor:
- Opens a <section data-title="..."> at every heading of the configured level
- Titles each section with the id the renderer gave its heading
- Puts any blocks before the first such heading into a "content" section
- Leaves a document without a heading at that level unwrapped
- Keeps the markup of every block byte-for-byte

Output shape:

    <section data-title="first">
      <h3 id="first"><a href="#first" class="anchor-link">First</a></h3>
      <p>some content</p>
    </section>
    <section data-title="second">
      ...
    </section>
"""

import logging
from html import escape
from typing import List, Sequence

from ..blocks import HeadingBlock, RenderedBlock, Section, join_blocks

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "content"
INDENT = "  "


def _is_section_heading(block: RenderedBlock, level: int) -> bool:
    return isinstance(block, HeadingBlock) and block.level == level


def group_sections(blocks: Sequence[RenderedBlock], level: int) -> List[Section]:
    """
    Partition blocks into sections bounded by headings at `level`.

    Args:
        blocks: Rendered top-level blocks in document order
        level: Heading level (1-6) that opens a section

    Returns:
        Sections in document order; empty when no heading is at `level`
    """
    if not any(_is_section_heading(block, level) for block in blocks):
        return []

    sections: List[Section] = []
    title, current = FALLBACK_TITLE, []

    for block in blocks:
        if _is_section_heading(block, level):
            if current:
                sections.append(Section(title=title, blocks=tuple(current)))
            title, current = block.id, [block]
        else:
            current.append(block)

    sections.append(Section(title=title, blocks=tuple(current)))
    return sections


def _render_section(section: Section, is_last: bool) -> str:
    parts = [f'<section data-title="{escape(section.title)}">\n']
    last_index = len(section.blocks) - 1

    for index, block in enumerate(section.blocks):
        spacing = block.spacing if block.spacing.endswith("\n") else block.spacing + "\n"
        if is_last and index == last_index:
            spacing = "\n"
        # Only the first line is indented so <pre> content stays exact
        parts.append(f"{INDENT}{block.markup}{spacing}")

    parts.append("</section>")
    return "".join(parts)


def header_sectionizer(blocks: Sequence[RenderedBlock], level: int = 3) -> str:
    """
    Wrap rendered blocks in <section> elements.

    Args:
        blocks: Rendered top-level blocks in document order
        level: Heading level (1-6) that opens a section (default: 3)

    Returns:
        Sectioned HTML, or the blocks joined unchanged when there is no
        heading at `level`
    """
    sections = group_sections(blocks, level)
    if not sections:
        return join_blocks(blocks)

    logger.debug(f"Grouped {len(blocks)} blocks into {len(sections)} sections")

    last = len(sections) - 1
    rendered = [_render_section(section, i == last) for i, section in enumerate(sections)]
    return "\n".join(rendered) + "\n"
