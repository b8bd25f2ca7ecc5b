"""Tests for converter configuration."""

from __future__ import annotations

import dataclasses

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from markdown_pages.markdown.config import ConverterConfig, get_markdown_config


class TestConverterConfig:
    def test_defaults(self) -> None:
        config = ConverterConfig()

        assert config.section_heading_level == 3
        assert config.own_host == ""
        assert config.highlight_theme == "default"

    @pytest.mark.parametrize("level", [0, 7, "3", 2.5, True])
    def test_invalid_heading_level(self, level) -> None:
        with pytest.raises(ImproperlyConfigured):
            ConverterConfig(section_heading_level=level)

    def test_unknown_theme(self) -> None:
        with pytest.raises(ImproperlyConfigured, match="no-such-theme"):
            ConverterConfig(highlight_theme="no-such-theme")

    def test_own_host_must_be_text(self) -> None:
        with pytest.raises(ImproperlyConfigured):
            ConverterConfig(own_host=None)

    def test_is_immutable(self) -> None:
        config = ConverterConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.section_heading_level = 2


class TestGetMarkdownConfig:
    def test_reads_settings(self) -> None:
        options = {
            "SECTION_HEADING_LEVEL": 2,
            "OWN_HOST": "blog.example.org",
            "HIGHLIGHT_THEME": "monokai",
        }
        with override_settings(MARKDOWN_PAGES=options):
            config = get_markdown_config()

        assert config == ConverterConfig(
            section_heading_level=2,
            own_host="blog.example.org",
            highlight_theme="monokai",
        )

    def test_own_host_defaults_to_allowed_hosts(self) -> None:
        with override_settings(MARKDOWN_PAGES={}, ALLOWED_HOSTS=["*", ".example.org", "www.example.org"]):
            assert get_markdown_config().own_host == "www.example.org"

    def test_no_concrete_allowed_host(self) -> None:
        with override_settings(MARKDOWN_PAGES={}, ALLOWED_HOSTS=["*"]):
            assert get_markdown_config().own_host == ""

    def test_invalid_setting(self) -> None:
        with override_settings(MARKDOWN_PAGES={"SECTION_HEADING_LEVEL": 9}):
            with pytest.raises(ImproperlyConfigured):
                get_markdown_config()
