# markdown_pages/markdown/extensions/__init__.py

from markdown.extensions.attr_list import AttrListExtension
from markdown.extensions.footnotes import FootnoteExtension
from markdown.extensions.smarty import SmartyExtension
from markdown.extensions.tables import TableExtension

from .external_links import ExternalLinkExtension
from .fenced_highlight import FencedHighlightExtension
from .heading_anchors import HeadingAnchorExtension
from .image_links import ImageLinkExtension

# Emit typographic characters directly rather than HTML entities
TYPOGRAPHIC_SUBSTITUTIONS = {
    "left-single-quote": "‘",
    "right-single-quote": "’",
    "left-double-quote": "“",
    "right-double-quote": "”",
    "left-angle-quote": "«",
    "right-angle-quote": "»",
    "ndash": "–",
    "mdash": "—",
    "ellipsis": "…",
}


def build_extensions(config):
    """
    Fresh extension instances for one render.

    Treeprocessor priorities decide the running order, not this list:
        inline (20) -> image_alt_marker (15) -> prettify (10) -> attr_list (8)
        -> heading_anchors (7) -> external_links (6) -> image_links (5)
        -> smarty (2) -> unescape (0)
    """
    return [
        FencedHighlightExtension(),
        FootnoteExtension(),
        TableExtension(),
        AttrListExtension(),
        SmartyExtension(substitutions=TYPOGRAPHIC_SUBSTITUTIONS),
        HeadingAnchorExtension(),
        ExternalLinkExtension(own_host=config.own_host),
        ImageLinkExtension(),
    ]
