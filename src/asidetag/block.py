"""AsideBlock - wraps converted block content in an <aside> element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class SupportsConvert(Protocol):
    """Anything that turns Markdown text into HTML."""

    def convert(self, content: str) -> str: ...


class BlockContentRenderer(Protocol):
    """Evaluates a block body against the active context.

    For Jinja this is the `caller` macro handed to a call block.
    """

    def __call__(self) -> str: ...


def capitalize_first(text: str) -> str:
    """Uppercase the first character of `text`, leaving the rest alone.

    Example:
        >>> capitalize_first("warning")
        'Warning'
        >>> capitalize_first("WARNING")
        'WARNING'
    """
    return text[:1].upper() + text[1:]


@dataclass
class AsideBlock:
    """One occurrence of {% aside <type> %}...{% endaside %}."""

    type: str  # raw tag parameter, e.g. "warning"

    def render(self, content: BlockContentRenderer, converter: SupportsConvert) -> str:
        """Render the block body and wrap it.

        The type is interpolated without escaping, both in the class
        attribute and in the heading.

        Args:
            content: Renders the raw block body.
            converter: Converts the raw body to HTML.

        Returns:
            The <aside> HTML fragment.
        """
        html = converter.convert(str(content()))
        return (
            f'<aside class="{self.type}">'
            f"<h1>{capitalize_first(self.type)}</h1>"
            f"{html}"
            "</aside>"
        )
