"""Tests for site configuration loading."""

import pytest
from pydantic import ValidationError

from asidetag.config import DEFAULT_MARKDOWN_EXT, SiteConfig, load_site_config


def test_defaults():
    """Test SiteConfig defaults match the built-in Markdown extensions."""

    config = SiteConfig()
    assert config.markdown_ext == DEFAULT_MARKDOWN_EXT
    assert config.markdown.extensions == []
    assert config.markdown.output_format == "html"
    assert config.markdown_extensions() == ["markdown", "mkdown", "mkdn", "mkd", "md"]


def test_markdown_extensions_normalized():
    """Extensions are trimmed, lowercased and stripped of dots."""

    config = SiteConfig(markdown_ext=" .MD, markdown ,,")
    assert config.markdown_extensions() == ["md", "markdown"]


def test_load_site_config(tmp_path):
    """Test loading Markdown options from a YAML file."""

    path = tmp_path / "site.yaml"
    path.write_text(
        "markdown:\n"
        "  extensions: [fenced_code]\n"
        "  extension_configs:\n"
        "    fenced_code:\n"
        "      lang_prefix: 'lang-'\n"
        "  output_format: xhtml\n"
    )

    config = load_site_config(path)

    assert config.markdown.extensions == ["fenced_code"]
    assert config.markdown.extension_configs == {"fenced_code": {"lang_prefix": "lang-"}}
    assert config.markdown.output_format == "xhtml"


def test_load_empty_file_gives_defaults(tmp_path):
    """An empty config file yields the default config."""

    path = tmp_path / "site.yaml"
    path.write_text("")
    assert load_site_config(path) == SiteConfig()


def test_load_missing_file(tmp_path):
    """A missing config file raises FileNotFoundError."""

    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.yaml")


def test_invalid_output_format(tmp_path):
    """An unknown output format fails validation."""

    path = tmp_path / "site.yaml"
    path.write_text("markdown:\n  output_format: pdf\n")
    with pytest.raises(ValidationError):
        load_site_config(path)
