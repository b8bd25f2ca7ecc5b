# markdown_pages/markdown/extensions/toc_extractor.py
"""
Section index of already-rendered, sectioned HTML.

Not a python-markdown extension: this is a post-render helper that reads the
<section data-title> wrappers with BeautifulSoup. It works on HTML that was
stored after rendering as well as on fresh MarkdownConverter output.
"""

from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup, Tag

from .heading_anchors import ANCHOR_CLASS

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


class SubheadingNode(TypedDict):
    id: str
    text: str
    level: int


class SectionEntry(TypedDict):
    title: str
    heading: str
    heading_html: str
    level: int
    subheadings: list[SubheadingNode]


def _extract_heading_contents(heading: Tag) -> tuple[str, str]:
    """
    Return the plain text and inner HTML that should be displayed for a heading.

    Anchor-wrapped headings keep their text inside the self-link, so prefer
    the anchor contents when present.
    """
    anchor = heading.find("a", class_=ANCHOR_CLASS)
    container = anchor if anchor else heading
    html = "".join(str(child) for child in container.contents)
    return container.get_text().strip(), html


def extract_section_index(html: str) -> list[SectionEntry]:
    """
    Given sectioned HTML, return one entry per top-level section for in-page navigation.

    Each entry contains:
        - title: The section's data-title (its anchor target)
        - heading: Plain-text version of the section's first heading
        - heading_html: HTML snippet preserving inline formatting
        - level: Level of that heading (0 when the section has none)
        - subheadings: Deeper headings in the section as {id, text, level}

    HTML without sections yields an empty list.
    """
    soup = BeautifulSoup(html, "html.parser")
    index: list[SectionEntry] = []

    for section in soup.find_all("section", attrs={"data-title": True}, recursive=False):
        headings = section.find_all(_HEADING_TAGS)

        entry: SectionEntry = {
            "title": section["data-title"],
            "heading": "",
            "heading_html": "",
            "level": 0,
            "subheadings": [],
        }

        if headings:
            first, rest = headings[0], headings[1:]
            entry["heading"], entry["heading_html"] = _extract_heading_contents(first)
            entry["level"] = int(first.name[1])
            for heading in rest:
                text, _ = _extract_heading_contents(heading)
                entry["subheadings"].append(
                    {"id": heading.get("id", ""), "text": text, "level": int(heading.name[1])}
                )

        index.append(entry)

    return index
