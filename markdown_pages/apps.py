from django.apps import AppConfig


class MarkdownPagesConfig(AppConfig):
    name = 'markdown_pages'
    verbose_name = 'Markdown pages'

    def ready(self):
        """Load the converter configuration so bad settings fail at startup."""
        from markdown_pages.markdown.config import get_markdown_config

        get_markdown_config()
