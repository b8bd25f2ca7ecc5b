# markdown_pages/markdown/errors.py


class RenderError(Exception):
    """The markdown source could not be rendered to HTML."""
