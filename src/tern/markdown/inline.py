"""Inline stages: bold, italic, inline code, links.

Run after every block stage, in this order. Bold must precede italic so
``**x**`` is claimed before the single-asterisk rule sees it.
"""

import re
from collections.abc import Callable

from tern.markdown.escape import escape_html, escape_text

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")
INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def parse_bold(text: str) -> str:
    return _BOLD_RE.sub(r"<strong>\1</strong>", text)


def parse_italic(text: str) -> str:
    """Single asterisks not touching another asterisk on either side."""
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def render_code_span(code: str) -> str:
    """``<code>`` with escaped content; fenced-code placeholders pass through."""
    return f"<code>{escape_text(code)}</code>"


def parse_inline_code(text: str) -> str:
    """Backtick spans on one line; the span content is escaped."""
    return INLINE_CODE_RE.sub(lambda m: render_code_span(m.group(1)), text)


def make_link_parser(target: str | None = "_blank") -> Callable[[str], str]:
    """Build a link stage that emits ``target`` on every anchor.

    Only ``"`` is escaped in the href; the rest of the URL is kept as
    written so already-escaped entities are not escaped twice.
    """
    target_attr = f' target="{escape_html(target)}"' if target else ""

    def _replace(match: re.Match[str]) -> str:
        label, href = match.group(1), match.group(2).replace('"', "&quot;")
        return f'<a href="{href}"{target_attr}>{label}</a>'

    def parse_links(text: str) -> str:
        return _LINK_RE.sub(_replace, text)

    return parse_links


parse_links = make_link_parser()
