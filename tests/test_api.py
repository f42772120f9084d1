"""Tests for the top-level API and the Markdown error boundary."""

import logging
import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import mdpreview
from mdpreview import (
    DEFAULT_ERROR_MESSAGE,
    Markdown,
    ParseConfig,
    RenderConfig,
    parse,
    render,
    to_html,
    tokenize,
)
from mdpreview.nodes import BlockQuote, Document, Heading
from mdpreview.tokens import TokenType


class TestPipelineFunctions:
    """tokenize / parse / render / to_html."""

    def test_tokenize_returns_tuple(self) -> None:
        """Tokens come back as a tuple."""
        tokens = tokenize("# Title\ntext")
        assert isinstance(tokens, tuple)
        assert [t.type for t in tokens] == [TokenType.HEADING, TokenType.TEXT]

    def test_parse_returns_document(self) -> None:
        """parse() gives a Document."""
        doc = parse(tokenize("# Hello"))
        assert isinstance(doc, Document)
        assert isinstance(doc.children[0], Heading)

    def test_render(self) -> None:
        """render() gives HTML."""
        assert render(parse("# Hello")) == "<h1>Hello</h1>\n"

    def test_to_html(self) -> None:
        """to_html() runs the whole pipeline."""
        assert to_html("Hello **World**") == "<p>Hello <strong>World</strong></p>\n"

    def test_to_html_empty(self) -> None:
        """Empty input renders to nothing."""
        assert to_html("") == ""


class TestMarkdown:
    """The guarded Markdown callable."""

    def test_call(self) -> None:
        """Calling compiles markdown."""
        md = Markdown()
        assert md("# Hello **World**") == "<h1>Hello <strong>World</strong></h1>\n"

    @pytest.mark.parametrize("source", ["", "   ", "\n\n\t\n"])
    def test_blank_input_gives_empty_string(self, source: str) -> None:
        """Whitespace-only input short-circuits."""
        assert Markdown()(source) == ""

    def test_none_input_gives_empty_string(self) -> None:
        """None is treated as blank."""
        assert Markdown()(None) == ""  # type: ignore[arg-type]

    def test_failure_returns_error_message(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unexpected failures are logged and replaced by the placeholder."""
        from mdpreview.renderers.html import HtmlRenderer

        def boom(self, node):
            raise RuntimeError("renderer exploded")

        monkeypatch.setattr(HtmlRenderer, "render", boom)

        with caplog.at_level(logging.ERROR, logger="mdpreview"):
            html = Markdown()("# Hello")

        assert html == DEFAULT_ERROR_MESSAGE
        assert "<h1>" not in html
        assert any(record.exc_info for record in caplog.records)

    def test_custom_error_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The placeholder is configurable."""
        from mdpreview.parser import Parser

        def boom(self):
            raise ValueError("parser exploded")

        monkeypatch.setattr(Parser, "parse", boom)

        md = Markdown(render_config=RenderConfig(error_message="<p>Fehler</p>"))
        assert md("text") == "<p>Fehler</p>"

    def test_configs_exposed(self) -> None:
        """Configs given at construction are exposed read-only."""
        parse_config = ParseConfig(max_quote_depth=3)
        render_config = RenderConfig(highlight=False)
        md = Markdown(parse_config=parse_config, render_config=render_config)
        assert md.parse_config is parse_config
        assert md.render_config is render_config

    def test_render_config_applied(self) -> None:
        """The instance's render config is used for its calls only."""
        md = Markdown(render_config=RenderConfig(copy_button_label="Copy"))
        assert ">Copy</button>" in md("```\nx\n```")
        assert ">COPY</button>" in to_html("```\nx\n```")

    def test_parse_config_applied(self) -> None:
        """The instance's parse config limits quote depth."""
        md = Markdown(parse_config=ParseConfig(max_quote_depth=1))
        doc = md.parse("> > > deep")
        inner = doc.children[0].children[0]
        assert isinstance(inner, BlockQuote)
        assert not isinstance(inner.children[0], BlockQuote)

    def test_crlf_input(self) -> None:
        """Windows line endings compile like Unix ones."""
        md = Markdown()
        assert md("# A\r\n\r\ntext") == md("# A\n\ntext")


class TestPipelineProperties:
    """Properties of the full pipeline."""

    @given(st.text(alphabet="#>-*_`[]()!^|: \nabc12", max_size=300))
    @settings(max_examples=200)
    def test_idempotent(self, source: str) -> None:
        """Compiling twice gives identical output."""
        assert to_html(source) == to_html(source)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        """Arbitrary text compiles to a string."""
        assert isinstance(to_html(source), str)

    @given(st.text(alphabet='abc <&" \n', max_size=200))
    @settings(max_examples=200)
    def test_special_characters_escaped(self, source: str) -> None:
        """Markup characters in text never reach the output raw."""
        text = re.sub(r"</?p>|<br />", "", to_html(source))
        assert "<" not in text
        assert '"' not in text
        assert re.fullmatch(r"(?:[^&]|&(?:amp|lt|gt|quot);)*", text, re.DOTALL)

    def test_version(self) -> None:
        """The package exposes its version."""
        assert isinstance(mdpreview.__version__, str)
