# markdown_pages/markdown/extensions/image_links.py
"""
Wrap images in a link to their full-resolution source.

    ![A chart](/media/chart.png)

becomes

    <a href="/media/chart.png" target="_blank" rel="noopener noreferrer"><img src="/media/chart.png" alt="A chart" /></a>

An author opts out by setting the alt text to the empty string with an
attribute list:

    ![](/media/divider.png){: alt=""}

Markdown always emits an alt attribute, so `![](src)` alone has alt="" too.
ImageAltMarker runs straight after inline parsing and drops that implicit
empty alt; any alt="" left when the images are wrapped was therefore set
explicitly. Images that already sit inside a link are never wrapped.
"""

import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .external_links import mark_external


class ImageAltMarker(Treeprocessor):
    def run(self, root):
        for img in root.iter("img"):
            if img.get("alt") == "":
                del img.attrib["alt"]


class ImageLinkTreeprocessor(Treeprocessor):
    def run(self, root):
        images = [
            (parent, child)
            for parent in root.iter()
            for child in parent
            if child.tag == "img"
        ]

        for parent, img in images:
            alt = img.get("alt")
            if alt is None:
                img.set("alt", "")
            elif alt == "":
                continue

            src = img.get("src")
            if not src or parent.tag == "a":
                continue

            link = etree.Element("a")
            link.set("href", src)
            mark_external(link)

            index = list(parent).index(img)
            parent.remove(img)
            link.tail, img.tail = img.tail, None
            link.append(img)
            parent.insert(index, link)


class ImageLinkExtension(Extension):
    def extendMarkdown(self, md):
        # Between inline (20) and attr_list (8)
        md.treeprocessors.register(ImageAltMarker(md), "image_alt_marker", priority=15)
        md.treeprocessors.register(ImageLinkTreeprocessor(md), "image_links", priority=5)


def makeExtension(**kwargs):
    return ImageLinkExtension(**kwargs)
