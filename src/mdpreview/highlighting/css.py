"""CSS highlighter.

Words are classified by where they sit: outside braces they are selectors,
inside braces a word followed by ``:`` is a property, and after that ``:``
until ``;`` or ``}`` everything is part of the value.
"""

from __future__ import annotations

from collections.abc import Iterator

from mdpreview.highlighting.base import (
    DIGITS,
    HEX_DIGITS,
    IDENT_CHARS,
    BaseHighlighter,
    Span,
    SpanKind,
    next_non_space,
    scan_past,
    scan_quoted,
    scan_while,
)

PUNCTUATION = frozenset("{}:;,()")

_WORD_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_#.-")
_WORD_CHARS = _WORD_START | DIGITS
_UNIT_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ%")
_NUMBER_CHARS = DIGITS | {"."}


class CssHighlighter(BaseHighlighter):
    """Highlighter for CSS stylesheets."""

    name = "css"
    aliases = ("css",)

    def tokenize(self, code: str) -> Iterator[Span]:
        pos = 0
        code_len = len(code)
        depth = 0
        in_value = False

        while pos < code_len:
            char = code[pos]
            following = code[pos + 1] if pos + 1 < code_len else ""

            if code.startswith("/*", pos):
                kind, end = SpanKind.COMMENT, scan_past(code, pos + 2, "*/")
            elif char == '"' or char == "'":
                kind, end = SpanKind.STRING, scan_quoted(code, pos)
            elif char == "@" and following and following in _WORD_CHARS:
                kind, end = SpanKind.KEYWORD, scan_while(code, pos + 1, _WORD_CHARS)
            elif char == "!" and following and following in IDENT_CHARS:
                kind, end = SpanKind.KEYWORD, scan_while(code, pos + 1, IDENT_CHARS)
            elif char == "#" and in_value and following and following in HEX_DIGITS:
                kind, end = SpanKind.NUMBER, scan_while(code, pos + 1, HEX_DIGITS)
            elif char in DIGITS or (
                following in DIGITS and (char == "." or (char == "-" and in_value))
            ):
                end = scan_while(code, pos + 1, _NUMBER_CHARS)
                kind, end = SpanKind.NUMBER, scan_while(code, end, _UNIT_CHARS)
            elif char in _WORD_START:
                end = scan_while(code, pos, _WORD_CHARS)
                kind = _classify_word(code, pos, end, depth, in_value)
            elif char == ":" and depth == 0:
                end = scan_while(code, pos, ":")
                kind, end = SpanKind.SELECTOR_PSEUDO, scan_while(code, end, _WORD_CHARS)
            elif char in PUNCTUATION:
                kind, end = SpanKind.PUNCTUATION, pos + 1
                if char == "{":
                    depth += 1
                    in_value = False
                elif char == "}":
                    depth = max(depth - 1, 0)
                    in_value = False
                elif char == ":":
                    in_value = True
                elif char == ";":
                    in_value = False
            elif char.isspace():
                kind, end = SpanKind.TEXT, max(scan_while(code, pos, " \t\r\n"), pos + 1)
            else:
                kind, end = SpanKind.TEXT, pos + 1

            yield Span(kind, code[pos:end])
            pos = end


def _classify_word(code: str, start: int, end: int, depth: int, in_value: bool) -> SpanKind:
    if in_value:
        if end < len(code) and code[end] == "(":
            return SpanKind.BUILT_IN
        return SpanKind.LITERAL

    if depth > 0 and next_non_space(code, end) == ":":
        after = end
        while after < len(code) and code[after].isspace():
            after += 1
        if not code.startswith("::", after):
            return SpanKind.ATTRIBUTE

    if code[start] in "#.":
        return SpanKind.SELECTOR_CLASS
    return SpanKind.SELECTOR_TAG
