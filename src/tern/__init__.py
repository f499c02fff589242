"""Tern — lightweight markdown rendering for chat and template output.

Renders the small markdown subset produced by response templates and
chat input into HTML that can be embedded as-is.

Basic usage::

    from tern import render_markdown

    html = render_markdown("| A | B |\n| - | - |\n| 1 | 2 |")

Chat state in an injected store::

    from tern import ChatSession, MemoryStore

    session = ChatSession(MemoryStore())
    session.chat_id  # created on first access
"""

__version__ = "0.1.0"
__all__ = [
    "ChatSession",
    "ConfigurationError",
    "MarkdownRenderer",
    "MemoryStore",
    "RenderConfig",
    "StoreError",
    "TernError",
    "render_markdown",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tern`` (and ``tern --version``) free of the kida import.
    """
    if name in ("MarkdownRenderer", "render_markdown"):
        from tern.markdown import renderer as _renderer

        return getattr(_renderer, name)

    if name == "RenderConfig":
        from tern.config import RenderConfig

        return RenderConfig

    if name in ("ChatSession", "MemoryStore"):
        from tern import store as _store

        return getattr(_store, name)

    if name in ("ConfigurationError", "StoreError", "TernError"):
        from tern import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
