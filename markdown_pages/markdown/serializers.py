# markdown_pages/markdown/serializers.py
"""
XHTML serialiser for python-markdown element trees.

python-markdown's own serialiser writes attributes in lexical order, which
turns <a href="#x" class="anchor-link"> into <a class="anchor-link" href="#x">.
This one writes them in the order they were set. Escaping and empty elements
are handled the way markdown.serializers handles them for xhtml output.
"""

import re
import xml.etree.ElementTree as etree

HTML_EMPTY = {
    "area", "base", "basefont", "br", "col", "frame", "hr",
    "img", "input", "isindex", "link", "meta", "param",
}

# An ampersand that does not already start an entity
_AMP_RE = re.compile(r"&(?!(?:#[0-9]+|#x[0-9a-f]+|[0-9a-z]+);)", re.I)


def _escape_cdata(text: str) -> str:
    text = _AMP_RE.sub("&amp;", text)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _escape_attrib(text: str) -> str:
    text = _escape_cdata(text)
    return text.replace('"', "&quot;").replace("\n", "&#10;")


def _serialize(write, elem: etree.Element) -> None:
    tag = elem.tag
    text = elem.text

    if tag is etree.Comment:
        write(f"<!--{_escape_cdata(text or '')}-->")
    elif tag is etree.ProcessingInstruction:
        write(f"<?{_escape_cdata(text or '')}?>")
    elif tag is None:
        if text:
            write(_escape_cdata(text))
        for child in elem:
            _serialize(write, child)
    else:
        write(f"<{tag}")
        for name, value in elem.items():
            write(f' {name}="{_escape_attrib(str(value))}"')

        if tag.lower() in HTML_EMPTY:
            write(" />")
        else:
            write(">")
            if text:
                if tag.lower() in ("script", "style"):
                    write(text)
                else:
                    write(_escape_cdata(text))
            for child in elem:
                _serialize(write, child)
            write(f"</{tag}>")

    if elem.tail:
        write(_escape_cdata(elem.tail))


def to_xhtml_string(element: etree.Element) -> str:
    """Serialise an element (and its tail) keeping attribute order."""
    parts = []
    _serialize(parts.append, element)
    return "".join(parts)
