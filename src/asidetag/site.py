"""Site registry - holds the converters available to templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, TypeVar

from asidetag.config import SiteConfig, load_site_config
from asidetag.converters import Converter, MarkdownConverter
from asidetag.exceptions import ConverterNotFoundError

log = logging.getLogger(__name__)

C = TypeVar("C", bound=Converter)


class Site:
    """Registry of converters shared by every template rendered for a site."""

    def __init__(
        self,
        config: Optional[SiteConfig] = None,
        converters: Optional[Iterable[Converter]] = None,
    ):
        """Initialize the site.

        Args:
            config: Site configuration. Defaults to `SiteConfig()`.
            converters: Converters to register. When omitted, the default
                set (a single MarkdownConverter) is built from config.
                An explicit empty list registers nothing.
        """
        self.config = config or SiteConfig()
        if converters is None:
            self.converters = self._default_converters()
        else:
            self.converters = list(converters)

        log.debug(
            "Site converters: %s",
            ", ".join(type(c).__name__ for c in self.converters) or "(none)",
        )

    @classmethod
    def from_config_file(cls, path: Path) -> "Site":
        """Build a site from a YAML config file."""
        return cls(config=load_site_config(path))

    def _default_converters(self) -> list[Converter]:
        return [MarkdownConverter(self.config)]

    def find_converter_instance(self, klass: type[C]) -> C:
        """Return the first registered converter that is a `klass`.

        Raises:
            ConverterNotFoundError: If no registered converter matches.
        """
        for converter in self.converters:
            if isinstance(converter, klass):
                return converter
        raise ConverterNotFoundError(klass)

    def find_converter_for(self, ext: str) -> Optional[Converter]:
        """Return the converter handling files with extension `ext`, if any."""
        for converter in self.converters:
            if converter.matches(ext):
                return converter
        return None
