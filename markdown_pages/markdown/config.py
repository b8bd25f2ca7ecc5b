# markdown_pages/markdown/config.py

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULTS = {
    "SECTION_HEADING_LEVEL": 3,
    # None means "derive from ALLOWED_HOSTS"
    "OWN_HOST": None,
    "HIGHLIGHT_THEME": "default",
}


@dataclass(frozen=True)
class ConverterConfig:
    """
    Immutable settings for one MarkdownConverter.

    Attributes:
        section_heading_level: Heading level (1-6) that opens a new <section>
        own_host: Host name of this site; links to any other host are external
        highlight_theme: Pygments style used for the code highlighting stylesheet
    """

    section_heading_level: int = 3
    own_host: str = ""
    highlight_theme: str = "default"

    def __post_init__(self):
        level = self.section_heading_level
        if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 6:
            raise ImproperlyConfigured(
                f"Section heading level must be an integer from 1 to 6, got {level!r}"
            )
        if not isinstance(self.own_host, str):
            raise ImproperlyConfigured(
                f"Own host must be a string, got {self.own_host!r}"
            )
        try:
            get_style_by_name(self.highlight_theme)
        except ClassNotFound:
            raise ImproperlyConfigured(
                f"Unknown syntax highlighting theme: {self.highlight_theme!r}"
            ) from None


def _host_from_allowed_hosts(allowed_hosts) -> str:
    """Pick the first concrete host name out of ALLOWED_HOSTS."""
    for host in allowed_hosts or []:
        if host and host != "*" and not host.startswith("."):
            return host
    return ""


def get_markdown_config() -> ConverterConfig:
    """
    Build the converter configuration from Django settings.

    Reads the optional MARKDOWN_PAGES dict:

        MARKDOWN_PAGES = {
            "SECTION_HEADING_LEVEL": 3,
            "OWN_HOST": "www.example.org",
            "HIGHLIGHT_THEME": "default",
        }

    Outside a configured Django project the defaults are returned.
    """
    if not settings.configured:
        return ConverterConfig()

    options = {**DEFAULTS, **getattr(settings, "MARKDOWN_PAGES", {})}

    own_host = options["OWN_HOST"]
    if own_host is None:
        own_host = _host_from_allowed_hosts(getattr(settings, "ALLOWED_HOSTS", []))

    return ConverterConfig(
        section_heading_level=options["SECTION_HEADING_LEVEL"],
        own_host=own_host,
        highlight_theme=options["HIGHLIGHT_THEME"],
    )
