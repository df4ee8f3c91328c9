"""Configuration management for asidetag.

Site configuration is read from a YAML file:
- markdown_ext: comma-separated file extensions handled as Markdown
- markdown: options passed to the Python-Markdown converter
  - extensions: extension names (e.g. 'fenced_code', 'tables')
  - extension_configs: per-extension settings
  - output_format: 'html' or 'xhtml'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


DEFAULT_MARKDOWN_EXT = "markdown,mkdown,mkdn,mkd,md"


class MarkdownConfig(BaseModel):
    """Options for the Markdown converter."""

    extensions: list[str] = Field(
        default_factory=list, description="Python-Markdown extension names"
    )
    extension_configs: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Settings keyed by extension name"
    )
    output_format: Literal["html", "xhtml"] = Field(
        default="html", description="Serializer used for the HTML output"
    )


class SiteConfig(BaseModel):
    """Main site configuration."""

    markdown_ext: str = Field(
        default=DEFAULT_MARKDOWN_EXT,
        description="Comma-separated extensions converted as Markdown",
    )
    markdown: MarkdownConfig = Field(
        default_factory=MarkdownConfig, description="Markdown converter options"
    )

    def markdown_extensions(self) -> list[str]:
        """Return the normalized Markdown file extensions, without dots."""
        return [
            ext.strip().lstrip(".").lower()
            for ext in self.markdown_ext.split(",")
            if ext.strip()
        ]


def load_site_config(path: Path) -> SiteConfig:
    """Load site configuration from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SiteConfig(**data)
