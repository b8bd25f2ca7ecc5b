# markdown_pages/markdown/extensions/heading_anchors.py
"""
A Markdown extension that:
- Sets an id attribute on every heading element (h1–h6) from its text, unless
  an attribute list (`### Title {#custom}`) already gave it one.
- Converts the content of headings at level 2 and deeper into an anchor link
  to the heading's own id, with class "anchor-link".

Notes:
- Duplicate headings are not uniquified; both get the same id.
- A heading whose text has no letters or digits gets the id "section".
- Links already inside a heading are flattened into the self-link, since
  anchors cannot nest.
"""

import html
import re
import xml.etree.ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ..slugs import slugify

_HEADING_TAGS = {f"h{i}" for i in range(1, 7)}
_ESCAPED_CHAR_RE = re.compile(f"{util.STX}([0-9]+){util.ETX}")
_TAG_RE = re.compile(r"<[^>]+>")

ANCHOR_CLASS = "anchor-link"
EMPTY_SLUG_ID = "section"


def heading_text(elem: etree.Element, md) -> str:
    """
    Plain text of a heading element in the middle of the pipeline.

    Stashed raw HTML (inline tags, typographic substitutions) is resolved to
    its text and backslash escapes are turned back into the characters they
    protect.
    """

    def _stashed_text(m):
        try:
            raw = md.htmlStash.rawHtmlBlocks[int(m.group(1))]
        except (IndexError, ValueError):
            return ""
        if isinstance(raw, etree.Element):
            return "".join(raw.itertext())
        return html.unescape(_TAG_RE.sub("", raw))

    text = "".join(elem.itertext())
    text = util.HTML_PLACEHOLDER_RE.sub(_stashed_text, text)
    text = _ESCAPED_CHAR_RE.sub(lambda m: chr(int(m.group(1))), text)
    return text.strip()


def _append_text(parent: etree.Element, text) -> None:
    if not text:
        return
    if len(parent):
        parent[-1].tail = (parent[-1].tail or "") + text
    else:
        parent.text = (parent.text or "") + text


class HeadingAnchorTreeprocessor(Treeprocessor):
    def __init__(self, md, anchor_min_level: int = 2, anchor_class: str = ANCHOR_CLASS):
        super().__init__(md)
        self.anchor_min_level = anchor_min_level
        self.anchor_class = anchor_class

    def _wrap_in_anchor(self, heading: etree.Element, slug: str) -> None:
        anchor = etree.Element("a")
        anchor.set("href", f"#{slug}")
        anchor.set("class", self.anchor_class)

        anchor.text = heading.text
        heading.text = None

        for child in list(heading):
            heading.remove(child)
            if child.tag == "a":
                # Keep the link's content, drop the link itself
                _append_text(anchor, child.text)
                for grand in list(child):
                    child.remove(grand)
                    anchor.append(grand)
                _append_text(anchor, child.tail)
            else:
                anchor.append(child)

        heading.append(anchor)

    def run(self, root: etree.Element):
        headings = [elem for elem in root.iter() if elem.tag in _HEADING_TAGS]
        for heading in headings:
            level = int(heading.tag[1])

            slug = heading.get("id")
            if not slug:
                slug = slugify(heading_text(heading, self.md)) or EMPTY_SLUG_ID
                heading.set("id", slug)

            if level >= self.anchor_min_level:
                self._wrap_in_anchor(heading, slug)


class HeadingAnchorExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "anchor_min_level": [2, "Shallowest heading level wrapped in a self-link"],
            "anchor_class": [ANCHOR_CLASS, "CSS class of the heading self-link"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # After attr_list (8) so explicit ids win, before smarty (2)
        md.treeprocessors.register(
            HeadingAnchorTreeprocessor(
                md,
                anchor_min_level=self.getConfig("anchor_min_level"),
                anchor_class=self.getConfig("anchor_class"),
            ),
            "heading_anchors",
            priority=7,
        )


def makeExtension(**kwargs):
    return HeadingAnchorExtension(**kwargs)
