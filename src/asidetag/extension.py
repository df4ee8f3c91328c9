"""Jinja2 extension for {% aside %}...{% endaside %} blocks."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.runtime import Context
from markupsafe import Markup

from asidetag.block import AsideBlock, BlockContentRenderer
from asidetag.converters import MarkdownConverter
from asidetag.exceptions import SiteNotConfiguredError
from asidetag.site import Site

log = logging.getLogger(__name__)


class AsideExtension(Extension):
    """Extension for {% aside <type> %}...{% endaside %} blocks.

    The block body is rendered with the surrounding context, converted
    from Markdown with the site's MarkdownConverter and wrapped:

        <aside class="<type>"><h1><Type></h1>...converted body...</aside>

    The parameter is free text: everything up to the closing delimiter
    (trimmed) is used as the type, unvalidated and unescaped.

    Example:
        {% aside warning %}
        Do **not** run this in production, {{ user }}.
        {% endaside %}
    """

    tags = {"aside"}

    def __init__(self, environment: Environment):
        super().__init__(environment)
        # Bound by register(); runtime attribute, not part of Environment's type
        environment.extend(site=None)

    def _scan_pattern(self) -> re.Pattern[str]:
        """Match opening aside tags, and the regions that must stay verbatim.

        Raw sections, comments and print expressions are matched first so an
        aside tag inside them is skipped over rather than rewritten.
        """
        env = self.environment
        b_start = re.escape(env.block_start_string)
        b_end = re.escape(env.block_end_string)
        v_start = re.escape(env.variable_start_string)
        v_end = re.escape(env.variable_end_string)
        c_start = re.escape(env.comment_start_string)
        c_end = re.escape(env.comment_end_string)
        return re.compile(
            rf"(?P<raw>{b_start}[-+]?\s*raw\s*[-+]?{b_end}.*?"
            rf"{b_start}[-+]?\s*endraw\s*[-+]?{b_end})"
            rf"|(?P<comment>{c_start}.*?{c_end})"
            rf"|(?P<expr>{v_start}.*?{v_end})"
            rf"|(?P<open>{b_start}[-+]?\s*aside)\b(?P<param>.*?)(?P<close>[-+]?{b_end})",
            re.DOTALL,
        )

    def preprocess(
        self, source: str, name: Optional[str], filename: Optional[str] = None
    ) -> str:
        """Quote the raw parameter of every opening aside tag.

        Jinja's lexer would split `warning-box` into several tokens and
        reject text like `a"b` outright, so the parameter is turned into a
        single string literal before tokenizing.
        """
        if "aside" not in source:
            return source

        def quote(match: re.Match[str]) -> str:
            if match.group("open") is None:
                return match.group(0)
            # Non-ASCII stays literal; the lexer's unicode-escape decoding
            # restores it exactly, including characters outside the BMP.
            param = json.dumps(match.group("param").strip(), ensure_ascii=False)
            return f"{match.group('open')} {param} {match.group('close')}"

        return self._scan_pattern().sub(quote, source)

    def parse(self, parser):
        """Parse the {% aside "<type>" %}...{% endaside %} block."""
        lineno = next(parser.stream).lineno
        aside_type = parser.stream.expect("string").value

        body = parser.parse_statements(("name:endaside",), drop_needle=True)

        return nodes.CallBlock(
            self.call_method(
                "_render_aside", [nodes.Const(aside_type), nodes.ContextReference()]
            ),
            [],
            [],
            body,
        ).set_lineno(lineno)

    def _render_aside(
        self, aside_type: str, context: Context, caller: BlockContentRenderer
    ) -> Markup:
        """Render one aside block at template render time.

        Args:
            aside_type: Raw tag parameter.
            context: Active template context.
            caller: Renders the block body.

        Returns:
            The wrapped HTML, marked safe for autoescaping environments.

        Raises:
            SiteNotConfiguredError: If no site is bound to the environment.
            ConverterNotFoundError: If the site has no MarkdownConverter.
        """
        site: Optional[Site] = context.environment.site  # type: ignore[attr-defined]
        if site is None:
            raise SiteNotConfiguredError()
        converter = site.find_converter_instance(MarkdownConverter)

        log.debug("Rendering aside %r (template %s)", aside_type, context.name)
        return Markup(AsideBlock(aside_type).render(caller, converter))


def register(environment: Environment, site: Site) -> Environment:
    """Install the aside tag on `environment` and bind `site` to it.

    Safe to call more than once; the last site bound wins.

    Args:
        environment: Jinja2 environment owned by the host application.
        site: Registry the tag resolves its Markdown converter from.

    Returns:
        The same environment, for chaining.
    """
    environment.add_extension(AsideExtension)
    environment.site = site  # type: ignore[attr-defined]
    return environment


def create_environment(site: Optional[Site] = None, **options: Any) -> Environment:
    """Create a Jinja2 Environment with the aside tag registered.

    Args:
        site: Site to bind. Defaults to a site built from default config.
        **options: Passed through to `jinja2.Environment`.

    Returns:
        Configured Jinja2 Environment.
    """
    env = Environment(**options)
    return register(env, site if site is not None else Site())
