"""asidetag - a Jinja2 {% aside %} block tag with Markdown bodies."""

from asidetag.block import AsideBlock, capitalize_first
from asidetag.config import MarkdownConfig, SiteConfig, load_site_config
from asidetag.converters import Converter, MarkdownConverter
from asidetag.exceptions import (
    AsideTagError,
    ConverterConfigError,
    ConverterNotFoundError,
    SiteNotConfiguredError,
)
from asidetag.extension import AsideExtension, create_environment, register
from asidetag.site import Site

__version__ = "0.1.0"

__all__ = [
    "AsideBlock",
    "AsideExtension",
    "AsideTagError",
    "Converter",
    "ConverterConfigError",
    "ConverterNotFoundError",
    "MarkdownConfig",
    "MarkdownConverter",
    "Site",
    "SiteConfig",
    "SiteNotConfiguredError",
    "capitalize_first",
    "create_environment",
    "load_site_config",
    "register",
]
