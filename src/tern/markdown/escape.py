"""HTML escaping for leaf text (code spans, code blocks, table cells)."""

import html
import re

# Stand-ins for fenced code held out of the pipeline. NUL never survives
# input normalisation, so user text cannot forge one.
PLACEHOLDER = "<\x00code:{index}\x00>"
PLACEHOLDER_RE = re.compile(r"<\x00code:(\d+)\x00>")


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` for text and attribute use."""
    if not text:
        return ""
    return html.escape(text, quote=True)


def escape_text(text: str) -> str:
    """Like ``escape_html`` but leaves code-fence placeholders intact."""
    parts = PLACEHOLDER_RE.split(text)
    if len(parts) == 1:
        return escape_html(text)
    # split() interleaves the captured index between the gaps.
    out: list[str] = []
    for i, part in enumerate(parts):
        if i % 2:
            out.append(PLACEHOLDER.format(index=part))
        else:
            out.append(escape_html(part))
    return "".join(out)
