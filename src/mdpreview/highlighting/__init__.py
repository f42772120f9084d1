"""Syntax highlighting protocol and registry for mdpreview.

Four highlighters ship with the package: JavaScript, CSS, HTML and C#.
Code block languages are looked up by normalized tag (trimmed, lower-cased);
unknown tags fall back to plain escaped text.

Usage:
    from mdpreview.highlighting import get_highlighter, highlight

    highlight("let x = 1;", "js")       # highlighted markup
    highlight("print(1)", "python")     # escaped text
    get_highlighter("C#")               # CSharpHighlighter(name='csharp')

Contract for highlighters:
    - MUST return markup for any input (never raise for odd code)
    - MUST escape HTML entities in code
    - MUST use CSS classes (not inline styles)
    - MUST terminate; every scan step consumes input
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from mdpreview.highlighting.base import BaseHighlighter, Span, SpanKind, render_spans
from mdpreview.highlighting.csharp import CSharpHighlighter
from mdpreview.highlighting.css import CssHighlighter
from mdpreview.highlighting.html import HtmlHighlighter
from mdpreview.highlighting.javascript import JavaScriptHighlighter
from mdpreview.utils.text import escape_html


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and return HTML markup with syntax classes
    applied. Implementations hold no per-call state.
    """

    name: str
    aliases: tuple[str, ...]

    def highlight(self, code: str) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight (raw, unescaped)

        Returns:
            Escaped HTML markup with ``<span class="hljs-...">`` wrappers
        """
        ...


def _build_registry(*highlighters: Highlighter) -> Mapping[str, Highlighter]:
    table: dict[str, Highlighter] = {}
    for highlighter in highlighters:
        for alias in highlighter.aliases:
            table[normalize_language(alias)] = highlighter
    return MappingProxyType(table)


def normalize_language(language: str | None) -> str:
    """Normalize a code block language tag for lookup."""
    return (language or "").strip().lower()


HIGHLIGHTERS: Mapping[str, Highlighter] = _build_registry(
    JavaScriptHighlighter(),
    CssHighlighter(),
    HtmlHighlighter(),
    CSharpHighlighter(),
)


def get_highlighter(language: str | None) -> Highlighter | None:
    """Get the highlighter registered for a language tag, if any."""
    return HIGHLIGHTERS.get(normalize_language(language))


def supports_language(language: str | None) -> bool:
    """Check if a built-in highlighter handles the given language tag."""
    return normalize_language(language) in HIGHLIGHTERS


def highlight(code: str, language: str | None) -> str:
    """Highlight code for a language tag.

    Falls back to plain escaped text when no highlighter is registered
    for the language.

    Returns:
        Escaped markup, never wrapped in ``<pre>``/``<code>``.
    """
    highlighter = get_highlighter(language)
    if highlighter is None:
        return escape_html(code)
    return highlighter.highlight(code)


__all__ = [
    "HIGHLIGHTERS",
    "BaseHighlighter",
    "CSharpHighlighter",
    "CssHighlighter",
    "Highlighter",
    "HtmlHighlighter",
    "JavaScriptHighlighter",
    "Span",
    "SpanKind",
    "get_highlighter",
    "highlight",
    "normalize_language",
    "render_spans",
    "supports_language",
]
