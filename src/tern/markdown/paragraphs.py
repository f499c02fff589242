"""Paragraph stage — wraps whatever no earlier stage claimed."""


def _is_structural(trimmed: str) -> bool:
    return trimmed.startswith("<") and trimmed.endswith(">")


def parse_paragraphs(text: str) -> str:
    """Group runs of plain lines into ``<p>`` blocks.

    A structural line (``<...>``) or a blank line ends the current run.
    Structural lines pass through unchanged; blank lines are dropped.
    Lines in a run are trimmed and joined with a single space.
    """
    result: list[str] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            result.append(f"<p>{' '.join(pending)}</p>")
            pending.clear()

    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            flush()
        elif _is_structural(trimmed):
            flush()
            result.append(line)
        else:
            pending.append(trimmed)

    flush()
    return "\n".join(result)
