"""Tests for the markdown template tags."""

from __future__ import annotations

from django.template import Context, Template


def render(template: str, **context) -> str:
    return Template("{% load markdown_tags %}" + template).render(Context(context))


class TestMarkdownFilter:
    def test_renders_sections(self) -> None:
        html = render("{{ body|markdown }}", body="### A\nx\n")

        assert html == (
            '<section data-title="a">\n'
            '  <h3 id="a"><a href="#a" class="anchor-link">A</a></h3>\n'
            "  <p>x</p>\n"
            "</section>\n"
        )

    def test_output_is_not_autoescaped(self) -> None:
        html = render("{{ body|markdown }}", body="[x](https://python.org)")

        assert html == (
            '<p><a href="https://python.org" target="_blank" rel="noopener noreferrer">x</a></p>\n'
        )

    def test_own_host_from_settings(self) -> None:
        html = render("{{ body|markdown }}", body="[home](https://www.example.org/)")

        assert html == '<p><a href="https://www.example.org/">home</a></p>\n'

    def test_empty_value(self) -> None:
        assert render("{{ body|markdown }}", body=None) == ""


class TestMarkdownSectionsTag:
    def test_section_navigation(self) -> None:
        html = render(
            "{% markdown_sections body as sections %}"
            "{% for s in sections %}<a href=\"#{{ s.title }}\">{{ s.heading }}</a>{% endfor %}",
            body="### First\nx\n\n### Second\ny\n",
        )

        assert html == '<a href="#first">First</a><a href="#second">Second</a>'


class TestHighlightCss:
    def test_stylesheet(self) -> None:
        css = render("{% highlight_css %}")

        assert ".highlight" in css
        assert ".highlight .nb" in css
