"""ContextVar-based configuration for mdpreview.

Two frozen configs are kept in ContextVars (PEP 567):

- ``ParseConfig``: read by every Parser, including blockquote sub-parsers.
- ``RenderConfig``: read by HtmlRenderer and the ``Markdown`` boundary.

Config is set once per Markdown call and read by everything running in that
context. Nothing in the pipeline writes to it.

Usage:
    # In Markdown class
    md = Markdown(render_config=RenderConfig(copy_button_label="Copy"))
    html = md("# Hello")  # Sets config internally via ContextVar

    # Direct usage (advanced)
    from mdpreview.config import render_config_context, RenderConfig

    with render_config_context(RenderConfig(highlight=False)):
        html = HtmlRenderer().render(doc)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Self

DEFAULT_ERROR_MESSAGE = "<p>An error occurred while parsing</p>"


def _filter_fields(cls: type, config_dict: Mapping[str, Any]) -> dict[str, Any]:
    valid_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    return {k: v for k, v in config_dict.items() if k in valid_fields}


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        max_quote_depth: Deepest blockquote nesting that is parsed structurally.
            Content nested deeper is kept as plain paragraph text.
        max_list_depth: Deepest list nesting that opens new sublists.
            Items indented deeper join the innermost open list.

    """

    max_quote_depth: int = 64
    max_list_depth: int = 32

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> Self:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"max_quote_depth": 8, "other": 1}).max_quote_depth
            8

        """
        return cls(**_filter_fields(cls, config_dict))


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        highlight: Run known-language code blocks through the built-in
            highlighters. When False every code block is plain escaped text.
        copy_button_label: Label of the copy button emitted with each code block
        error_message: Markup returned by ``Markdown`` when compilation fails

    """

    highlight: bool = True
    copy_button_label: str = "COPY"
    error_message: str = DEFAULT_ERROR_MESSAGE

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> Self:
        """Create RenderConfig from dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"highlight": False}).highlight
            False

        """
        return cls(**_filter_fields(cls, config_dict))


# Module-level defaults (reused, never recreated)
_DEFAULT_PARSE_CONFIG: ParseConfig = ParseConfig()
_DEFAULT_RENDER_CONFIG: RenderConfig = RenderConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_PARSE_CONFIG,
)
_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_RENDER_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default parse configuration."""
    _parse_config.set(_DEFAULT_PARSE_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary parse config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_quote_depth=2)):
        ...     doc = parse(tokenize("> > > deep"))

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


def get_render_config() -> RenderConfig:
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default render configuration."""
    _render_config.set(_DEFAULT_RENDER_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary render config changes."""
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ParseConfig",
    "RenderConfig",
    "get_parse_config",
    "get_render_config",
    "parse_config_context",
    "render_config_context",
    "reset_parse_config",
    "reset_render_config",
    "set_parse_config",
    "set_render_config",
]
