"""Block stages: fenced code, tables, blockquotes, rules, headers, lists.

Each stage takes the whole document and returns the whole document.
Stages are independent line scans rather than one grammar; the order in
which the renderer applies them decides which stage claims a line.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from tern.markdown.escape import PLACEHOLDER, PLACEHOLDER_RE, escape_html, escape_text
from tern.markdown.inline import INLINE_CODE_RE, render_code_span

# -- Fenced code --

_FENCE_RE = re.compile(r"```([\s\S]*?)```")


def render_code_block(code: str, *, copy_button: bool = False, copy_label: str = "Copy") -> str:
    """Render already-trimmed code as a ``<pre><code>`` block.

    The ``<pre>`` wrapper is always present; display code attaches its
    behaviour by looking for it. With *copy_button* the wrapper also gets
    ``data-copy-text`` and a ``.copy-btn`` button (see ``COPY_SNIPPET``).
    """
    escaped = escape_html(code)
    if not copy_button:
        return f"<pre><code>{escaped}</code></pre>"
    return (
        f'<pre data-copy-text="{escaped}"><code>{escaped}</code>'
        f'<button type="button" class="copy-btn">{escape_html(copy_label)}</button></pre>'
    )


@dataclass(slots=True)
class CodeFences:
    """Rendered code blocks held out of the pipeline until the final pass.

    ``extract()`` swaps each fenced region for a one-line placeholder so no
    block or inline stage can reinterpret code content. ``restore()`` puts
    the rendered blocks back after paragraphs have been wrapped.
    """

    copy_button: bool = False
    copy_label: str = "Copy"
    blocks: list[str] = field(default_factory=list)

    def extract(self, text: str) -> str:
        return _FENCE_RE.sub(self._stash, text)

    def restore(self, text: str) -> str:
        if not self.blocks:
            return text
        return PLACEHOLDER_RE.sub(lambda m: self.blocks[int(m.group(1))], text)

    def _stash(self, match: re.Match[str]) -> str:
        self.blocks.append(
            render_code_block(
                match.group(1).strip(),
                copy_button=self.copy_button,
                copy_label=self.copy_label,
            )
        )
        return PLACEHOLDER.format(index=len(self.blocks) - 1)


def extract_code_blocks(text: str, fences: CodeFences) -> str:
    """Replace fenced regions with placeholders recorded on *fences*.

    An opening fence without a closing one is left as literal text.
    """
    return fences.extract(text)


# -- Tables --

_SEPARATOR_RE = re.compile(r"^\|[\s\-:|]+\|$")


def _split_cells(line: str) -> list[str]:
    # Empty cells are dropped, so |a|b| and a|b give the same row.
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def _render_cell(cell: str) -> str:
    """Escape cell text, rendering its code spans in the same pass.

    Spans are rendered here so the later inline-code stage never sees
    already-escaped text. Stray backticks become entities so that stage
    cannot pair them across cell boundaries.
    """
    out: list[str] = []
    pos = 0
    for match in INLINE_CODE_RE.finditer(cell):
        out.append(escape_text(cell[pos : match.start()]).replace("`", "&#96;"))
        out.append(render_code_span(match.group(1)))
        pos = match.end()
    out.append(escape_text(cell[pos:]).replace("`", "&#96;"))
    return "".join(out)


def build_table(lines: list[str]) -> str:
    """Build a single-line ``<table>`` from a header line and body lines.

    The separator line must already be removed. Cell text is escaped;
    fenced-code placeholders in cells are kept for the final restore.
    """
    if not lines:
        return ""

    parts = ["<table><thead><tr>"]
    parts.extend(f"<th>{_render_cell(cell)}</th>" for cell in _split_cells(lines[0]))
    parts.append("</tr></thead><tbody>")
    for line in lines[1:]:
        parts.append("<tr>")
        parts.extend(f"<td>{_render_cell(cell)}</td>" for cell in _split_cells(line))
        parts.append("</tr>")
    parts.append("</tbody></table>")
    return "".join(parts)


def parse_tables(text: str) -> str:
    """Turn header + separator + pipe-line runs into tables.

    A pipe line not followed by a separator line is left alone.
    """
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        if "|" in line and i + 1 < len(lines) and _SEPARATOR_RE.match(lines[i + 1].strip()):
            table_lines = [line]
            i += 2
            while i < len(lines) and "|" in lines[i]:
                table_lines.append(lines[i])
                i += 1
            result.append(build_table(table_lines))
            continue

        result.append(line)
        i += 1

    return "\n".join(result)


# -- Line-anchored substitutions --

_BLOCKQUOTE_RE = re.compile(r"^> (.+)$", re.MULTILINE)
_RULE_RE = re.compile(r"^---$", re.MULTILINE)
_HEADER_RES = (
    (re.compile(r"^### (.+)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.+)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.+)$", re.MULTILINE), r"<h1>\1</h1>"),
)


def parse_blockquotes(text: str) -> str:
    """Wrap each ``> `` line in its own ``<blockquote>``.

    Consecutive quote lines are not merged.
    """
    return _BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", text)


def parse_horizontal_rules(text: str) -> str:
    return _RULE_RE.sub("<hr>", text)


def parse_headers(text: str) -> str:
    """Levels 3, 2, 1 — longest marker first."""
    for pattern, replacement in _HEADER_RES:
        text = pattern.sub(replacement, text)
    return text


# -- Lists --

_BULLET_RE = re.compile(r"^[-*+] (.+)")
_ORDERED_RE = re.compile(r"^\d+\. (.+)")
_BULLET_PREFIX_RE = re.compile(r"^[-*+] ")
_ORDERED_PREFIX_RE = re.compile(r"^\d+\. ")


class ListKind(Enum):
    """Open list state for ``parse_lists``; the value is the tag name."""

    BULLET = "ul"
    ORDERED = "ol"


def parse_lists(text: str) -> str:
    """Group contiguous list-item lines into ``<ul>``/``<ol>`` blocks.

    A change of marker type closes the open list and opens the other
    kind. Any other line, including a blank one, closes the open list.
    """
    result: list[str] = []
    current: ListKind | None = None

    for line in text.split("\n"):
        trimmed = line.strip()

        if _BULLET_RE.match(trimmed):
            kind, content = ListKind.BULLET, _BULLET_PREFIX_RE.sub("", trimmed, count=1)
        elif _ORDERED_RE.match(trimmed):
            kind, content = ListKind.ORDERED, _ORDERED_PREFIX_RE.sub("", trimmed, count=1)
        else:
            if current is not None:
                result.append(f"</{current.value}>")
                current = None
            result.append(line)
            continue

        if current is not kind:
            if current is not None:
                result.append(f"</{current.value}>")
            result.append(f"<{kind.value}>")
            current = kind
        result.append(f"<li>{content}</li>")

    if current is not None:
        result.append(f"</{current.value}>")

    return "\n".join(result)
