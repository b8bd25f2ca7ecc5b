# markdown_pages/markdown/__init__.py

from .config import ConverterConfig, get_markdown_config
from .converter import MarkdownConverter, render_markdown
from .errors import RenderError
from .slugs import slugify

__all__ = [
    "ConverterConfig",
    "MarkdownConverter",
    "RenderError",
    "get_markdown_config",
    "render_markdown",
    "slugify",
]
