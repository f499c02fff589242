"""Lightweight markdown-to-HTML rendering.

Converts the small markdown subset produced by response templates and
chat input into HTML: fenced code, tables, blockquotes, rules, headers,
flat lists, bold, italic, inline code, links and paragraphs.

Basic usage::

    from tern.markdown import render_markdown

    html = render_markdown("**Booked** for *Friday*")

In kida templates::

    from tern.markdown import register_markdown_filter

    register_markdown_filter(env)

    {{ content | markdown }}
"""

from tern.markdown.escape import escape_html
from tern.markdown.filters import (
    COPY_SCRIPT,
    COPY_SNIPPET,
    markdown_filter,
    register_markdown_filter,
)
from tern.markdown.renderer import MarkdownRenderer, render_markdown

__all__ = [
    "COPY_SCRIPT",
    "COPY_SNIPPET",
    "MarkdownRenderer",
    "escape_html",
    "markdown_filter",
    "register_markdown_filter",
    "render_markdown",
]
