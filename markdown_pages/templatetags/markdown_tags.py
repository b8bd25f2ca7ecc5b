# markdown_pages/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from markdown_pages.markdown.config import get_markdown_config
from markdown_pages.markdown.converter import MarkdownConverter, render_markdown
from markdown_pages.markdown.extensions.fenced_highlight import highlight_stylesheet

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value or ""))


@register.simple_tag
def markdown_sections(value):
    """
    Section index for in-page navigation.

        {% markdown_sections page.body as sections %}
        {% for section in sections %}<a href="#{{ section.title }}">{{ section.heading }}</a>{% endfor %}
    """
    return MarkdownConverter().section_index(value or "")


@register.simple_tag
def highlight_css():
    """Pygments stylesheet for the configured highlighting theme."""
    return mark_safe(highlight_stylesheet(get_markdown_config().highlight_theme))
