# markdown_pages/markdown/extensions/external_links.py
"""
Add target="_blank" and rel="noopener noreferrer" to external links.

Runs on the element tree while the document is rendered, so the attributes
are part of the markup every later stage sees. A link is external when its
href names a host other than the site's own host. Relative links, fragments,
mailto: links and anything urlparse rejects are left alone.
"""

from urllib.parse import urlparse

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

EXTERNAL_LINK_ATTRS = (
    ("target", "_blank"),
    ("rel", "noopener noreferrer"),
)


def _hostname(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def normalize_host(host: str) -> str:
    """'WWW.Example.org:8000' -> 'www.example.org'"""
    if not host:
        return ""
    if "://" not in host and not host.startswith("//"):
        host = f"//{host}"
    return _hostname(host)


def is_external_link(href: str, own_host: str = "") -> bool:
    """Check if a link points away from the site."""
    if not href:
        return False

    hostname = _hostname(href)
    if not hostname:
        return False

    return hostname != normalize_host(own_host)


def mark_external(link) -> None:
    for name, value in EXTERNAL_LINK_ATTRS:
        link.set(name, value)


class ExternalLinkTreeprocessor(Treeprocessor):
    def __init__(self, md, own_host: str = ""):
        super().__init__(md)
        self.own_host = own_host

    def run(self, root):
        for link in root.iter("a"):
            if is_external_link(link.get("href", ""), self.own_host):
                mark_external(link)


class ExternalLinkExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "own_host": ["", "Host name of this site; other hosts are external"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.treeprocessors.register(
            ExternalLinkTreeprocessor(md, own_host=self.getConfig("own_host")),
            "external_links",
            priority=6,
        )


def makeExtension(**kwargs):
    return ExternalLinkExtension(**kwargs)
