# markdown_pages/markdown/renderer.py

import logging
import xml.etree.ElementTree as etree
from typing import List, Optional, Set

import markdown

from .blocks import HeadingBlock, OtherBlock, RenderedBlock, join_blocks
from .config import ConverterConfig, get_markdown_config
from .errors import RenderError
from .extensions import build_extensions
from .serializers import to_xhtml_string

logger = logging.getLogger(__name__)

_HEADING_TAGS = {f"h{i}" for i in range(1, 7)}


class BlockMarkdown(markdown.Markdown):
    """
    python-markdown that hands the document back as top-level blocks.

    Follows Markdown.convert() up to the element tree, then serialises and
    post-processes each child of the root on its own. The markup of every
    block is what convert() would have produced for it inside the whole
    document.

    The spacing after a block mirrors the source: a block followed by a blank
    line gets an empty line after it, any other block a single newline.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.serializer = to_xhtml_string

    def convert_to_blocks(self, source: str) -> List[RenderedBlock]:
        if not source.strip():
            return []

        self.lines = source.split("\n")
        for prep in self.preprocessors:
            self.lines = prep.run(self.lines)

        root, blank_after = self._parse_root()
        for treeprocessor in self.treeprocessors:
            new_root = treeprocessor.run(root)
            if new_root is not None:
                root = new_root

        children = list(root)
        return [
            self._render_block(
                element,
                blank_after=element in blank_after and index < len(children) - 1,
            )
            for index, element in enumerate(children)
        ]

    def _parse_root(self):
        """
        BlockParser.parseDocument(), noting which root children a blank line
        follows.

        The parser splits the document into chunks on blank lines. A root
        child is followed by a blank line when the chunk it ends is used up
        by the same step that produced or extended it.
        """
        root = etree.Element(self.doc_tag)
        self.parser.root = root
        blocks = "\n".join(self.lines).split("\n\n")
        blank_after: Set[etree.Element] = set()

        while blocks:
            remaining = len(blocks)
            for processor in self.parser.blockprocessors:
                if processor.test(root, blocks[0]):
                    if processor.run(root, blocks) is not False:
                        break
            if len(root):
                if len(blocks) < remaining:
                    blank_after.add(root[-1])
                else:
                    blank_after.discard(root[-1])

        # Blank lines put around fenced code only to separate it from its
        # neighbours are not in the source
        joins = getattr(self, "fence_joins", {})
        children = list(root)
        for index, child in enumerate(children):
            if child.tag != "p" or len(child) or child.text not in joins:
                continue
            joined_before, joined_after = joins[child.text]
            if joined_before and index:
                blank_after.discard(children[index - 1])
            if joined_after:
                blank_after.discard(child)

        return root, blank_after

    def _serialize(self, element: etree.Element) -> str:
        tail, element.tail = element.tail, None
        try:
            output = self.serializer(element)
        finally:
            element.tail = tail

        for pp in self.postprocessors:
            output = pp.run(output)
        return output

    def _render_block(self, element: etree.Element, blank_after: bool = False) -> RenderedBlock:
        markup = self._serialize(element)
        spacing = "\n\n" if blank_after else "\n"

        if element.tag in _HEADING_TAGS:
            return HeadingBlock(
                markup=markup,
                level=int(element.tag[1]),
                id=element.get("id", ""),
                spacing=spacing,
            )
        return OtherBlock(markup=markup, spacing=spacing)


def render_blocks(text: str, config: Optional[ConverterConfig] = None) -> List[RenderedBlock]:
    """
    Render markdown to its ordered top-level blocks.

    Links and images have already been rewritten when this returns.

    Args:
        text: Markdown source
        config: Converter configuration (default: from Django settings)

    Returns:
        List of HeadingBlock / OtherBlock in document order

    Raises:
        RenderError: The source could not be rendered
    """
    config = config or get_markdown_config()

    if not isinstance(text, str):
        raise RenderError(f"Markdown source must be text, not {type(text).__name__}")

    md = BlockMarkdown(extensions=build_extensions(config), output_format="xhtml")
    try:
        return md.convert_to_blocks(text)
    except RenderError:
        raise
    except Exception as e:
        logger.error(f"Markdown rendering failed: {e}", exc_info=True)
        raise RenderError(f"Could not render markdown: {e}") from e


def render_html(text: str, config: Optional[ConverterConfig] = None) -> str:
    """Render markdown to HTML without sectioning."""
    return join_blocks(render_blocks(text, config))
