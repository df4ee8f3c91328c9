"""asidetag Exceptions

Custom exceptions raised while rendering aside blocks.
"""

from __future__ import annotations


class AsideTagError(Exception):
    """Base exception for all asidetag errors."""

    pass


class SiteNotConfiguredError(AsideTagError):
    """Raised when an environment renders an aside without a bound site."""

    def __init__(self) -> None:
        super().__init__(
            "No site bound to the Jinja environment; call register(env, site) first"
        )


class ConverterNotFoundError(AsideTagError):
    """Raised when the site has no converter of the requested class."""

    def __init__(self, klass: type):
        self.klass = klass
        super().__init__(f"No converter found for {klass.__name__}")


class ConverterConfigError(AsideTagError):
    """Raised when a converter cannot be built from its options."""

    pass
