# markdown_pages/markdown/postprocessors/__init__.py

from .header_sectionizer import group_sections, header_sectionizer

__all__ = ["group_sections", "header_sectionizer"]
