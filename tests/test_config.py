"""Tests for ContextVar-based configuration.

Validates thread isolation, context manager behavior, and config inheritance
for blockquote sub-parsers.
"""

from threading import Thread

import pytest

from mdpreview import (
    ParseConfig,
    RenderConfig,
    get_parse_config,
    get_render_config,
    parse,
    parse_config_context,
    render_config_context,
    reset_parse_config,
    reset_render_config,
    set_parse_config,
    set_render_config,
)
from mdpreview.config import DEFAULT_ERROR_MESSAGE
from mdpreview.nodes import BlockQuote, Paragraph


class TestConfigDataclasses:
    """Test frozen config dataclass behavior."""

    def test_default_values(self) -> None:
        """Defaults match the documented values."""
        assert ParseConfig().max_quote_depth == 64
        assert ParseConfig().max_list_depth == 32
        config = RenderConfig()
        assert config.highlight is True
        assert config.copy_button_label == "COPY"
        assert config.error_message == DEFAULT_ERROR_MESSAGE

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.highlight = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        """Unknown keys are dropped silently."""
        config = RenderConfig.from_dict({"copy_button_label": "Copy", "theme": "dark"})
        assert config.copy_button_label == "Copy"
        assert config.highlight is True

    def test_parse_config_from_dict(self) -> None:
        """ParseConfig.from_dict builds from known keys."""
        assert ParseConfig.from_dict({"max_quote_depth": 2}).max_quote_depth == 2
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVars:
    """Set, reset and scoped configuration."""

    def test_set_and_reset_parse_config(self) -> None:
        """set_parse_config applies until reset."""
        try:
            set_parse_config(ParseConfig(max_quote_depth=5))
            assert get_parse_config().max_quote_depth == 5
        finally:
            reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset_render_config(self) -> None:
        """set_render_config applies until reset."""
        try:
            set_render_config(RenderConfig(highlight=False))
            assert get_render_config().highlight is False
        finally:
            reset_render_config()
        assert get_render_config().highlight is True

    def test_context_manager_restores_on_error(self) -> None:
        """The previous config comes back even if the block raises."""
        with pytest.raises(RuntimeError), render_config_context(
            RenderConfig(copy_button_label="x")
        ):
            raise RuntimeError
        assert get_render_config().copy_button_label == "COPY"

    def test_nested_contexts(self) -> None:
        """Inner contexts shadow outer ones and restore them."""
        with parse_config_context(ParseConfig(max_quote_depth=1)):
            with parse_config_context(ParseConfig(max_quote_depth=2)):
                assert get_parse_config().max_quote_depth == 2
            assert get_parse_config().max_quote_depth == 1
        assert get_parse_config().max_quote_depth == 64

    def test_sub_parsers_inherit_config(self) -> None:
        """Blockquote sub-parsers read the same context."""
        with parse_config_context(ParseConfig(max_quote_depth=0)):
            (quote,) = parse("> # not parsed").children
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_thread_isolation(self) -> None:
        """A config set in one thread is invisible in another."""
        seen: list[int] = []

        def worker() -> None:
            seen.append(get_parse_config().max_quote_depth)

        with parse_config_context(ParseConfig(max_quote_depth=3)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [64]
