"""Tests for the attribute-order-preserving XHTML serialiser."""

from __future__ import annotations

import xml.etree.ElementTree as etree

from markdown_pages.markdown.serializers import to_xhtml_string


class TestToXhtmlString:
    def test_attributes_in_insertion_order(self) -> None:
        link = etree.Element("a")
        link.set("href", "#x")
        link.set("class", "anchor-link")
        link.text = "X"

        assert to_xhtml_string(link) == '<a href="#x" class="anchor-link">X</a>'

    def test_empty_elements_are_self_closed(self) -> None:
        image = etree.Element("img")
        image.set("src", "/i.png")
        image.set("alt", "")

        assert to_xhtml_string(image) == '<img src="/i.png" alt="" />'

    def test_text_and_attributes_are_escaped(self) -> None:
        para = etree.Element("p")
        para.set("title", 'say "hi"')
        para.text = "a < b & c &amp; d"

        assert to_xhtml_string(para) == (
            '<p title="say &quot;hi&quot;">a &lt; b &amp; c &amp; d</p>'
        )

    def test_children_and_tails(self) -> None:
        para = etree.Element("p")
        para.text = "one "
        strong = etree.SubElement(para, "strong")
        strong.text = "two"
        strong.tail = " three"

        assert to_xhtml_string(para) == "<p>one <strong>two</strong> three</p>"

    def test_comments(self) -> None:
        div = etree.Element("div")
        div.append(etree.Comment(" note "))

        assert to_xhtml_string(div) == "<div><!-- note --></div>"
