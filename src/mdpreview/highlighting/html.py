"""HTML highlighter.

Recognises comments, doctypes and tags (name, attributes, quoted or bare
values). Everything between tags is plain text. Malformed markup is never
rejected: a ``<`` that does not open a tag is just text.
"""

from __future__ import annotations

from collections.abc import Generator, Iterator

from mdpreview.highlighting.base import (
    BaseHighlighter,
    Span,
    SpanKind,
    scan_past,
    scan_while,
)

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_TAG_NAME_CHARS = _LETTERS | frozenset("0123456789-")
_ATTR_START = _LETTERS | frozenset("_:-@")
_ATTR_CHARS = _ATTR_START | frozenset("0123456789.")
_SPACE = " \t\r\n"


class HtmlHighlighter(BaseHighlighter):
    """Highlighter for HTML markup."""

    name = "html"
    aliases = ("html", "htm")

    def tokenize(self, code: str) -> Iterator[Span]:
        pos = 0
        code_len = len(code)
        while pos < code_len:
            if code.startswith("<!--", pos):
                end = scan_past(code, pos + 4, "-->")
                yield Span(SpanKind.COMMENT, code[pos:end])
            elif code[pos : pos + 9].lower() == "<!doctype":
                end = scan_past(code, pos, ">")
                yield Span(SpanKind.META, code[pos:end])
            elif _opens_tag(code, pos):
                end = yield from self._tokenize_tag(code, pos)
            else:
                end = code.find("<", pos + 1)
                if end == -1:
                    end = code_len
                yield Span(SpanKind.TEXT, code[pos:end])
            pos = end

    def _tokenize_tag(self, code: str, pos: int) -> Generator[Span, None, int]:
        """Yield the spans of one tag and return the index after it.

        Stops early, without consuming it, at a ``<`` inside the tag so that
        an unclosed tag does not swallow the next one.
        """
        code_len = len(code)
        name_start = pos + 2 if code.startswith("</", pos) else pos + 1
        yield Span(SpanKind.PUNCTUATION, code[pos:name_start])

        pos = scan_while(code, name_start, _TAG_NAME_CHARS)
        yield Span(SpanKind.TAG, code[name_start:pos])

        expect_value = False
        while pos < code_len:
            char = code[pos]
            if char == ">":
                yield Span(SpanKind.PUNCTUATION, ">")
                return pos + 1
            if char == "<":
                return pos

            if char in _SPACE:
                kind, end = SpanKind.TEXT, scan_while(code, pos, _SPACE)
            elif char == '"' or char == "'":
                kind, end = SpanKind.STRING, scan_past(code, pos + 1, char)
                expect_value = False
            elif expect_value:
                end = pos + 1
                while end < code_len and code[end] not in _SPACE and code[end] not in "<>":
                    end += 1
                kind = SpanKind.STRING
                expect_value = False
            elif char == "=":
                kind, end = SpanKind.PUNCTUATION, pos + 1
                expect_value = True
            elif char == "/":
                kind, end = SpanKind.PUNCTUATION, pos + 1
            elif char in _ATTR_START:
                kind, end = SpanKind.ATTR, scan_while(code, pos, _ATTR_CHARS)
            else:
                kind, end = SpanKind.TEXT, pos + 1

            yield Span(kind, code[pos:end])
            pos = end

        return pos


def _opens_tag(code: str, pos: int) -> bool:
    if code[pos] != "<":
        return False
    name_pos = pos + 2 if code.startswith("</", pos) else pos + 1
    return name_pos < len(code) and code[name_pos] in _LETTERS
