"""Template filter registration for Markdown rendering.

Provides a one-liner to register a ``markdown`` filter on a kida
Environment so that templates can use ``{{ content | markdown }}``.
"""

from typing import Any

from kida import Environment
from kida.template import Markup

from tern.config import RenderConfig
from tern.markdown.renderer import MarkdownRenderer, render_markdown

# Click delegation for code-block copy buttons. Handles buttons inside
# content inserted after page load, so it is bound once on ``document``.
COPY_SCRIPT = """\
(function(){
  if(window.__ternCopy)return;
  window.__ternCopy=true;
  document.addEventListener("click",function(e){
    var btn=e.target.closest(".copy-btn");
    if(!btn)return;
    var wrap=btn.closest("[data-copy-text]");
    if(!wrap)return;
    var text=(wrap.dataset.copyText||"").trim();
    if(!text)return;
    var label=btn.textContent;
    navigator.clipboard.writeText(text).then(function(){
      btn.textContent="Copied!";
      setTimeout(function(){btn.textContent=label;},900);
    });
  });
})();
"""

COPY_SNIPPET = '<script data-tern="copy">' + COPY_SCRIPT + "</script>"


def markdown_filter(value: Any, *, config: RenderConfig | None = None) -> Markup:
    """Render *value* as markdown and mark the result safe.

    Example:
        {{ message.content | markdown }}

    """
    if value is None:
        return Markup("")
    return Markup(render_markdown(str(value), config))


def register_markdown_filter(
    env: Environment,
    *,
    config: RenderConfig | None = None,
    filter_name: str = "markdown",
) -> MarkdownRenderer:
    """Register a ``markdown`` template filter on a kida Environment.

    Creates a ``MarkdownRenderer`` and registers a filter around its
    ``render`` method. Returns the renderer so callers can also use it
    directly (e.g., in request handlers).

    Usage::

        from kida import Environment
        from tern.markdown import register_markdown_filter

        env = Environment(autoescape=True)
        md = register_markdown_filter(env)

        # In templates: {{ content | markdown }}
        # In code:      html = md.render("# Hello")

    Args:
        env: The kida environment to register the filter on.
        config: Renderer options (default: ``RenderConfig()``).
        filter_name: Template filter name (default: ``"markdown"``).

    Returns:
        The ``MarkdownRenderer`` instance backing the filter.
    """
    renderer = MarkdownRenderer(config)

    def _filter(value: Any) -> Markup:
        if value is None:
            return Markup("")
        return Markup(renderer.render(str(value)))

    env.update_filters({filter_name: _filter})
    return renderer
