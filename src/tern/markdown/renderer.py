"""Core markdown renderer.

Runs a fixed sequence of whole-string stages over the source. Each stage
consumes the previous stage's output; nothing is shared between calls, so
one renderer can serve any number of threads.

Stage order::

    code fences -> tables -> blockquotes -> rules -> headers -> lists
    -> bold -> italic -> inline code -> links -> paragraphs
    -> code fences restored
"""

import logging
from collections.abc import Callable

from tern.config import RenderConfig
from tern.markdown.blocks import (
    CodeFences,
    extract_code_blocks,
    parse_blockquotes,
    parse_headers,
    parse_horizontal_rules,
    parse_lists,
    parse_tables,
)
from tern.markdown.escape import escape_html
from tern.markdown.inline import make_link_parser, parse_bold, parse_inline_code, parse_italic
from tern.markdown.paragraphs import parse_paragraphs

logger = logging.getLogger("tern.markdown")

_DEFAULT_CONFIG = RenderConfig()


def _normalize(source: str) -> str:
    return source.replace("\r\n", "\n").replace("\r", "\n").replace("\x00", "")


class MarkdownRenderer:
    """Render a constrained markdown subset to HTML.

    The returned markup is final: leaf text in code blocks, inline code and
    table cells has already been escaped, so callers must not escape it
    again. Rendering never raises for string input; unmatched syntax falls
    through and ends up as paragraph text.

    Args:
        config: Renderer options (default: ``RenderConfig()``).
    """

    __slots__ = ("_config", "_stages")

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or _DEFAULT_CONFIG
        self._stages: tuple[Callable[[str], str], ...] = (
            parse_tables,
            parse_blockquotes,
            parse_horizontal_rules,
            parse_headers,
            parse_lists,
            parse_bold,
            parse_italic,
            parse_inline_code,
            make_link_parser(self._config.link_target),
            parse_paragraphs,
        )

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, source: str) -> str:
        """Render markdown source to an HTML string.

        Args:
            source: Raw markdown text.

        Returns:
            Rendered HTML. Empty source gives an empty string.
        """
        if not source:
            return ""

        limit = self._config.max_source_length
        if limit is not None and len(source) > limit:
            logger.warning(
                "Markdown source of %d chars exceeds limit of %d; rendering as escaped text",
                len(source),
                limit,
            )
            return f"<p>{escape_html(source)}</p>"

        fences = CodeFences(
            copy_button=self._config.copy_buttons,
            copy_label=self._config.copy_label,
        )
        html = extract_code_blocks(_normalize(source), fences)
        for stage in self._stages:
            html = stage(html)
        html = fences.restore(html)

        logger.debug(
            "Rendered %d chars of markdown to %d chars of HTML (%d code blocks)",
            len(source),
            len(html),
            len(fences.blocks),
        )
        return html

    __call__ = render


_default_renderer = MarkdownRenderer()


def render_markdown(source: str, config: RenderConfig | None = None) -> str:
    """Render markdown source to HTML with a one-off or default renderer."""
    if config is None:
        return _default_renderer.render(source)
    return MarkdownRenderer(config).render(source)
