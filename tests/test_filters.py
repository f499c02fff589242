"""Tests for tern.markdown.filters — kida filter registration and copy script."""

from __future__ import annotations

from kida import Environment

from tern.config import RenderConfig
from tern.markdown import (
    COPY_SCRIPT,
    COPY_SNIPPET,
    MarkdownRenderer,
    markdown_filter,
    register_markdown_filter,
)


def _env() -> Environment:
    return Environment(autoescape=True)


# ── markdown_filter ──────────────────────────────────────────────────────


class TestMarkdownFilter:
    def test_returns_markup(self) -> None:
        result = markdown_filter("say **hi**")
        assert hasattr(result, "__html__")
        assert str(result) == "<p>say <strong>hi</strong></p>"

    def test_none_is_empty(self) -> None:
        assert str(markdown_filter(None)) == ""

    def test_non_string_is_stringified(self) -> None:
        assert str(markdown_filter(42)) == "<p>42</p>"

    def test_config_forwarded(self) -> None:
        result = markdown_filter("[a](b)", config=RenderConfig(link_target=None))
        assert str(result) == '<p><a href="b">a</a></p>'


# ── register_markdown_filter ─────────────────────────────────────────────


class TestFilterRegistration:
    def test_returns_renderer(self) -> None:
        renderer = register_markdown_filter(_env())
        assert isinstance(renderer, MarkdownRenderer)

    def test_template_output_not_double_escaped(self) -> None:
        env = _env()
        register_markdown_filter(env)
        tpl = env.from_string("{{ body | markdown }}")
        html = tpl.render({"body": "use `<div>` for **layout**"}).strip()
        assert html == "<p>use <code>&lt;div&gt;</code> for <strong>layout</strong></p>"

    def test_plain_variable_still_autoescaped(self) -> None:
        env = _env()
        register_markdown_filter(env)
        tpl = env.from_string("{{ body }}")
        assert "&lt;b&gt;" in tpl.render({"body": "<b>"})

    def test_custom_filter_name(self) -> None:
        env = _env()
        register_markdown_filter(env, filter_name="md")
        tpl = env.from_string("{{ body | md }}")
        assert tpl.render({"body": "# Title"}).strip() == "<h1>Title</h1>"

    def test_config_applies_to_filter(self) -> None:
        env = _env()
        renderer = register_markdown_filter(env, config=RenderConfig(copy_buttons=True))
        assert renderer.config.copy_buttons is True
        tpl = env.from_string("{{ body | markdown }}")
        assert 'class="copy-btn"' in tpl.render({"body": "```\nls\n```"})


# ── Copy script ──────────────────────────────────────────────────────────


class TestCopyScript:
    def test_snippet_wraps_script(self) -> None:
        assert COPY_SNIPPET.startswith('<script data-tern="copy">')
        assert COPY_SNIPPET.endswith("</script>")
        assert COPY_SCRIPT in COPY_SNIPPET

    def test_targets_rendered_attributes(self) -> None:
        assert ".copy-btn" in COPY_SCRIPT
        assert "[data-copy-text]" in COPY_SCRIPT
        assert "Copied!" in COPY_SCRIPT
