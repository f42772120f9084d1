"""Shared machinery for the built-in syntax highlighters.

Every highlighter is a single forward pass over the code that yields
classified spans. ``BaseHighlighter.highlight`` turns the spans into
markup: each classified span becomes ``<span class="hljs-...">`` around
its escaped text, and plain text is escaped without a wrapper.

Stripping the tags from the output and unescaping the entities gives back
the input exactly, because spans partition the code with no gaps or
overlaps.

The scanning helpers below return end indices and never raise; an
unterminated construct simply runs to the end of the code.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

from mdpreview.stringbuilder import StringBuilder


class SpanKind(Enum):
    """Span classification. The value is the CSS class emitted for it."""

    TEXT = ""
    COMMENT = "hljs-comment"
    KEYWORD = "hljs-keyword"
    LITERAL = "hljs-literal"
    STRING = "hljs-string"
    NUMBER = "hljs-number"
    REGEXP = "hljs-regexp"
    FUNCTION = "hljs-title function_"
    TITLE = "hljs-title"
    BUILT_IN = "hljs-built_in"
    OPERATOR = "hljs-operator"
    PUNCTUATION = "hljs-punctuation"
    META = "hljs-meta"
    # CSS
    ATTRIBUTE = "hljs-attribute"
    SELECTOR_CLASS = "hljs-selector-class"
    SELECTOR_TAG = "hljs-selector-tag"
    SELECTOR_PSEUDO = "hljs-selector-pseudo"
    # HTML
    TAG = "hljs-name"
    ATTR = "hljs-attr"


class Span(NamedTuple):
    """A classified slice of highlighted code."""

    kind: SpanKind
    value: str


def render_spans(spans: Iterable[Span]) -> str:
    """Render spans to markup, escaping every value."""
    sb = StringBuilder()
    for kind, value in spans:
        if kind is SpanKind.TEXT:
            sb.append_escaped(value)
        else:
            sb.append(f'<span class="{kind.value}">').append_escaped(value).append("</span>")
    return sb.build()


class BaseHighlighter:
    """Base class for the built-in highlighters.

    Subclasses set ``name`` and ``aliases`` and implement ``tokenize``.
    Instances hold no per-call state and can be shared freely.
    """

    name: str = ""
    aliases: tuple[str, ...] = ()

    def tokenize(self, code: str) -> Iterator[Span]:
        """Yield spans that exactly cover ``code``."""
        raise NotImplementedError

    def highlight(self, code: str) -> str:
        """Highlight code and return markup (never raises for odd input)."""
        return render_spans(self.tokenize(code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# =============================================================================
# Scanning helpers
# =============================================================================

IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
IDENT_CHARS = IDENT_START | frozenset("0123456789")
DIGITS = frozenset("0123456789")
HEX_DIGITS = DIGITS | frozenset("abcdefABCDEF")


def scan_while(code: str, pos: int, chars: frozenset[str] | str) -> int:
    """Return the index of the first character at or after pos not in chars."""
    code_len = len(code)
    while pos < code_len and code[pos] in chars:
        pos += 1
    return pos


def scan_past(code: str, pos: int, terminator: str) -> int:
    """Return the index just past the next terminator, or len(code)."""
    end = code.find(terminator, pos)
    return len(code) if end == -1 else end + len(terminator)


def scan_line(code: str, pos: int) -> int:
    """Return the index of the next newline (excluded), or len(code)."""
    end = code.find("\n", pos)
    return len(code) if end == -1 else end


def scan_quoted(code: str, pos: int, *, multiline: bool = False) -> int:
    """Scan a quoted string starting at its opening quote.

    Backslash escapes the next character. Without ``multiline`` an unescaped
    newline ends the string and is not part of it.

    Returns:
        Index just past the closing quote (or where the string was cut off).
    """
    quote = code[pos]
    pos += 1
    code_len = len(code)
    while pos < code_len:
        char = code[pos]
        if char == "\\":
            pos += 2
            continue
        if char == quote:
            return pos + 1
        if char == "\n" and not multiline:
            return pos
        pos += 1
    return code_len


def match_operator(code: str, pos: int, operators: tuple[str, ...]) -> str | None:
    """Return the first operator in ``operators`` found at pos.

    ``operators`` must be sorted longest first.
    """
    for op in operators:
        if code.startswith(op, pos):
            return op
    return None


def longest_first(operators: Iterable[str]) -> tuple[str, ...]:
    """Sort an operator table longest first (stable for equal lengths)."""
    return tuple(sorted(set(operators), key=lambda op: (-len(op), op)))


def next_non_space(code: str, pos: int) -> str:
    """Return the first non-whitespace character at or after pos ('' at end)."""
    code_len = len(code)
    while pos < code_len and code[pos].isspace():
        pos += 1
    return code[pos] if pos < code_len else ""


def prev_non_space(code: str, pos: int) -> str:
    """Return the last non-whitespace character before pos ('' at start)."""
    pos -= 1
    while pos >= 0 and code[pos].isspace():
        pos -= 1
    return code[pos] if pos >= 0 else ""
