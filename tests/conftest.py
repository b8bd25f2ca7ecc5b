"""Test setup for markdown_pages."""

from __future__ import annotations

import django
import pytest
from django.conf import settings


def pytest_configure(config: pytest.Config) -> None:
    """Configure a minimal Django project so the app and template tags load."""
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=["markdown_pages"],
        ALLOWED_HOSTS=["www.example.org"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": False,
            }
        ],
        MARKDOWN_PAGES={"SECTION_HEADING_LEVEL": 3},
    )
    django.setup()


@pytest.fixture
def config():
    """Converter configuration for a site served from www.example.org."""
    from markdown_pages.markdown.config import ConverterConfig

    return ConverterConfig(section_heading_level=3, own_host="www.example.org")


@pytest.fixture
def converter(config):
    from markdown_pages.markdown.converter import MarkdownConverter

    return MarkdownConverter(config)
