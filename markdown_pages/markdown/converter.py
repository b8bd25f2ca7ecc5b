# markdown_pages/markdown/converter.py

import logging
from typing import List, Optional

from .config import ConverterConfig, get_markdown_config
from .extensions.toc_extractor import SectionEntry, extract_section_index
from .postprocessors.header_sectionizer import header_sectionizer
from .renderer import render_blocks

logger = logging.getLogger(__name__)


class MarkdownConverter:
    """
    Convert markdown into HTML for embedding in a content page.

    The output is split into <section> blocks at the configured heading
    level, external links open in a new tab, and images link to their source.

        converter = MarkdownConverter(ConverterConfig(own_host="www.example.org"))
        html = converter.as_html("### Intro\\nHello")

    Conversion is deterministic and keeps no state between calls, so one
    converter can be shared between threads.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or get_markdown_config()

    def as_html(self, text: str) -> str:
        """
        Render markdown to sectioned HTML.

        Raises:
            RenderError: The source could not be rendered
        """
        blocks = render_blocks(text, self.config)
        html = header_sectionizer(blocks, self.config.section_heading_level)
        logger.debug(f"Converted {len(text)} characters of markdown into {len(blocks)} blocks")
        return html

    def section_index(self, text: str) -> List[SectionEntry]:
        """Navigation entries for the sections of the rendered document."""
        return extract_section_index(self.as_html(text))


def render_markdown(text: str, config: Optional[ConverterConfig] = None) -> str:
    """Shortcut for MarkdownConverter(config).as_html(text)."""
    return MarkdownConverter(config).as_html(text)
