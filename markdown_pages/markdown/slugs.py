# markdown_pages/markdown/slugs.py

import re
import unicodedata

# Straight and typographic apostrophes are dropped, not turned into dashes
_APOSTROPHES_RE = re.compile(r"['‘’`]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Convert heading text to a lowercase, ASCII, hyphen-separated slug.

    "It's a header" -> "its-a-header"
    "Café au lait"  -> "cafe-au-lait"

    Never fails; the result may be empty when the text holds no letters or
    digits.
    """
    text = _APOSTROPHES_RE.sub("", text)
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _NON_ALNUM_RE.sub("-", text.lower())
    return text.strip("-")
