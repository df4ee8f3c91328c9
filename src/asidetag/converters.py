"""Content converters registered on a site."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

import markdown

from asidetag.config import MarkdownConfig, SiteConfig
from asidetag.exceptions import ConverterConfigError

log = logging.getLogger(__name__)


class Converter(ABC):
    """Base class for content converters"""

    @abstractmethod
    def matches(self, ext: str) -> bool:
        pass

    @abstractmethod
    def output_ext(self, ext: str) -> str:
        pass

    @abstractmethod
    def convert(self, content: str) -> str:
        pass


class MarkdownConverter(Converter):
    """Converts Markdown text to HTML using Python-Markdown.

    A single parser instance is kept and reset before every conversion,
    so state such as footnotes or reference links never leaks between
    calls. The lock lets one converter serve concurrent renders.
    """

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()
        self._extensions = set(self.config.markdown_extensions())
        self._md = self._build(self.config.markdown)
        self._lock = threading.Lock()

    @staticmethod
    def _build(options: MarkdownConfig) -> markdown.Markdown:
        """Create the parser, failing early on unknown extensions."""
        try:
            return markdown.Markdown(
                extensions=list(options.extensions),
                extension_configs=dict(options.extension_configs),
                output_format=options.output_format,
            )
        except (ImportError, KeyError) as e:
            raise ConverterConfigError(f"Invalid Markdown options: {e}") from e

    def matches(self, ext: str) -> bool:
        return ext.lstrip(".").lower() in self._extensions

    def output_ext(self, ext: str) -> str:
        return ".html"

    def convert(self, content: str) -> str:
        with self._lock:
            return self._md.reset().convert(content)
