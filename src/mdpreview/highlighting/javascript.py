"""JavaScript highlighter.

Scan priority at each position:

1. block and line comments
2. regex literals, where a regex may start
3. quoted strings and template literals
4. numbers
5. identifiers (keywords, literals, called functions)
6. brackets
7. operators, longest first

"""

from __future__ import annotations

from collections.abc import Iterator

from mdpreview.highlighting.base import (
    DIGITS,
    HEX_DIGITS,
    IDENT_CHARS,
    IDENT_START,
    BaseHighlighter,
    Span,
    SpanKind,
    longest_first,
    match_operator,
    next_non_space,
    prev_non_space,
    scan_line,
    scan_past,
    scan_quoted,
    scan_while,
)

KEYWORDS = frozenset({
    "if", "else", "switch", "case", "default", "for", "while", "do", "break",
    "continue", "return", "throw", "try", "catch", "finally", "new", "delete",
    "typeof", "instanceof", "in", "of", "class", "extends", "super", "this",
    "static", "get", "set", "async", "await", "yield", "void", "with",
})  # fmt: skip
IMPORT_KEYWORDS = frozenset({"import", "export", "from", "as", "default"})
DECLARATION_KEYWORDS = frozenset({"function", "let", "var", "const"})
VALUE_KEYWORDS = frozenset({"null", "undefined", "true", "false", "NaN", "Infinity"})

OPERATORS = longest_first([
    "=>", "===", "!==", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "...",
    "++", "--", "+=", "-=", "*=", "/=", "%=", "**", "**=", "&&=", "||=", "??=",
    "<<", ">>", ">>>", "+", "-", "*", "/", "%", "<", ">", "!", "=", "&", "|",
    "^", "~", "?", ":", ";", ",", ".",
])  # fmt: skip

BRACKETS = frozenset("()[]{}")

_IDENT_START = IDENT_START | {"$"}
_IDENT_CHARS = IDENT_CHARS | {"$"}
_REGEX_FLAGS = frozenset("dgimsuvy")
# A slash after one of these starts a regex literal rather than a division
_REGEX_PRECEDERS = frozenset("=(,[!&|:;{}?+-*%<>~^")
_REGEX_KEYWORDS = ("return", "typeof")


class JavaScriptHighlighter(BaseHighlighter):
    """Highlighter for JavaScript source."""

    name = "javascript"
    aliases = ("js", "javascript")

    def tokenize(self, code: str) -> Iterator[Span]:
        pos = 0
        code_len = len(code)
        while pos < code_len:
            char = code[pos]

            if code.startswith("/*", pos):
                kind, end = SpanKind.COMMENT, scan_past(code, pos + 2, "*/")
            elif code.startswith("//", pos):
                kind, end = SpanKind.COMMENT, scan_line(code, pos)
            elif char == "/" and (regex_end := self._scan_regex(code, pos)) is not None:
                kind, end = SpanKind.REGEXP, regex_end
            elif char == "'" or char == '"':
                kind, end = SpanKind.STRING, scan_quoted(code, pos)
            elif char == "`":
                kind, end = SpanKind.STRING, scan_quoted(code, pos, multiline=True)
            elif char in DIGITS or (
                char == "." and pos + 1 < code_len and code[pos + 1] in DIGITS
            ):
                kind, end = SpanKind.NUMBER, _scan_number(code, pos)
            elif char in _IDENT_START:
                end = scan_while(code, pos, _IDENT_CHARS)
                kind = _classify_word(code[pos:end], code, end)
            elif char in BRACKETS:
                kind, end = SpanKind.PUNCTUATION, pos + 1
            elif (op := match_operator(code, pos, OPERATORS)) is not None:
                kind, end = SpanKind.OPERATOR, pos + len(op)
            elif char.isspace():
                kind, end = SpanKind.TEXT, scan_while(code, pos, " \t\r\n")
                end = max(end, pos + 1)
            else:
                kind, end = SpanKind.TEXT, pos + 1

            yield Span(kind, code[pos:end])
            pos = end

    def _scan_regex(self, code: str, pos: int) -> int | None:
        """Scan a regex literal at pos, or return None if there is none.

        Only tried where a regex may start. The literal must close on the
        same line; ``/`` inside a ``[...]`` class does not close it.
        """
        if not _regex_allowed(code, pos):
            return None

        code_len = len(code)
        i = pos + 1
        in_class = False
        while i < code_len:
            char = code[i]
            if char == "\n":
                return None
            if char == "\\":
                if i + 1 < code_len and code[i + 1] == "\n":
                    return None
                i += 2
                continue
            if char == "[":
                in_class = True
            elif char == "]":
                in_class = False
            elif char == "/" and not in_class:
                return scan_while(code, i + 1, _REGEX_FLAGS)
            i += 1
        return None


def _regex_allowed(code: str, pos: int) -> bool:
    prev = prev_non_space(code, pos)
    if not prev or prev in _REGEX_PRECEDERS:
        return True

    end = pos
    while end > 0 and code[end - 1].isspace():
        end -= 1
    for keyword in _REGEX_KEYWORDS:
        start = end - len(keyword)
        if (
            start >= 0
            and code[start:end] == keyword
            and (start == 0 or code[start - 1] not in _IDENT_CHARS)
        ):
            return True
    return False


def _scan_number(code: str, pos: int) -> int:
    code_len = len(code)
    if code[pos] == "0" and pos + 1 < code_len and code[pos + 1] in "xXbBoO":
        end = scan_while(code, pos + 2, HEX_DIGITS | {"_"})
    else:
        end = scan_while(code, pos, DIGITS | {".", "_"})
        if end < code_len and code[end] in "eE":
            exp = end + 1
            if exp < code_len and code[exp] in "+-":
                exp += 1
            if exp < code_len and code[exp] in DIGITS:
                end = scan_while(code, exp, DIGITS | {"_"})
    # BigInt suffix
    if end < code_len and code[end] == "n":
        end += 1
    return end


def _classify_word(word: str, code: str, end: int) -> SpanKind:
    if word in DECLARATION_KEYWORDS or word in IMPORT_KEYWORDS or word in KEYWORDS:
        return SpanKind.KEYWORD
    if word in VALUE_KEYWORDS:
        return SpanKind.LITERAL
    if next_non_space(code, end) == "(":
        return SpanKind.FUNCTION
    return SpanKind.TEXT
