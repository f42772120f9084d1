"""C# highlighter.

Scan priority at each position:

1. ``///`` doc comments, ``//`` line comments, block comments
2. preprocessor directives and ``[Attribute]`` lines
3. verbatim, interpolated and regular strings, char literals
4. numbers with suffixes
5. identifiers (keywords, types, literals, called methods)
6. operators, longest first
7. brackets

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
    scan_line,
    scan_past,
    scan_quoted,
    scan_while,
)

KEYWORDS = frozenset({
    "if", "else", "switch", "case", "default", "for", "foreach", "while", "do",
    "break", "continue", "return", "throw", "try", "catch", "finally", "new",
    "typeof", "is", "as", "sizeof", "stackalloc", "checked", "unchecked", "lock",
    "using", "yield", "await", "async", "goto", "in", "out", "ref", "params",
    "base", "this", "when", "where", "select", "from", "orderby", "group", "by",
    "join", "let", "ascending", "descending", "on", "equals", "into", "nameof",
})  # fmt: skip
DECLARATION_KEYWORDS = frozenset({
    "class", "struct", "interface", "enum", "delegate", "namespace", "public",
    "private", "protected", "internal", "static", "readonly", "const", "volatile",
    "virtual", "override", "abstract", "sealed", "extern", "unsafe", "partial",
    "get", "set", "add", "remove", "value", "var", "dynamic", "record", "init",
    "event", "operator", "implicit", "explicit", "required",
})  # fmt: skip
TYPE_KEYWORDS = frozenset({
    "void", "int", "long", "short", "byte", "sbyte", "uint", "ulong", "ushort",
    "float", "double", "decimal", "char", "bool", "string", "object", "nint", "nuint",
})  # fmt: skip
VALUE_KEYWORDS = frozenset({"null", "true", "false", "default"})

OPERATORS = longest_first([
    "=>", "??", "?.", "==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=",
    "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", "??=", "<<", ">>", "+", "-",
    "*", "/", "%", "<", ">", "!", "=", "&", "|", "^", "~", "?", ":", ";", ",", ".",
    "::",
])  # fmt: skip

BRACKETS = frozenset("(){}[]")

_SUFFIXES = frozenset("fFdDmMlLuU")
_SECOND_SUFFIXES = frozenset("lLuU")
# Characters allowed between the angle brackets of generic arguments
_GENERIC_CHARS = IDENT_CHARS | frozenset(" \t,.?[]")


class CSharpHighlighter(BaseHighlighter):
    """Highlighter for C# source."""

    name = "csharp"
    aliases = ("cs", "csharp", "c#")

    def tokenize(self, code: str) -> Iterator[Span]:
        pos = 0
        code_len = len(code)
        while pos < code_len:
            char = code[pos]
            following = code[pos + 1] if pos + 1 < code_len else ""

            if code.startswith("//", pos):
                # Covers /// doc comments as well
                kind, end = SpanKind.COMMENT, scan_line(code, pos)
            elif code.startswith("/*", pos):
                kind, end = SpanKind.COMMENT, scan_past(code, pos + 2, "*/")
            elif char == "#" and _at_line_start(code, pos):
                kind, end = SpanKind.META, scan_line(code, pos)
            elif (
                char == "["
                and _at_line_start(code, pos)
                and (attr_end := _scan_attribute(code, pos)) is not None
            ):
                kind, end = SpanKind.META, attr_end
            elif (string_end := _scan_prefixed_string(code, pos)) is not None:
                kind, end = SpanKind.STRING, string_end
            elif char == '"' or char == "'":
                kind, end = SpanKind.STRING, scan_quoted(code, pos)
            elif char in DIGITS or (char == "." and following in DIGITS):
                kind, end = SpanKind.NUMBER, _scan_number(code, pos)
            elif char == "@" and following in IDENT_START:
                # @identifier: an escaped keyword used as a plain name
                kind, end = SpanKind.TEXT, scan_while(code, pos + 1, IDENT_CHARS)
            elif char in IDENT_START:
                end = scan_while(code, pos, IDENT_CHARS)
                kind = _classify_word(code[pos:end], code, end)
            elif (op := match_operator(code, pos, OPERATORS)) is not None:
                kind, end = SpanKind.OPERATOR, pos + len(op)
            elif char in BRACKETS:
                kind, end = SpanKind.PUNCTUATION, pos + 1
            elif char.isspace():
                kind, end = SpanKind.TEXT, max(scan_while(code, pos, " \t\r\n"), pos + 1)
            else:
                kind, end = SpanKind.TEXT, pos + 1

            yield Span(kind, code[pos:end])
            pos = end


def _at_line_start(code: str, pos: int) -> bool:
    line_start = code.rfind("\n", 0, pos) + 1
    return code[line_start:pos].strip() == ""


def _scan_attribute(code: str, pos: int) -> int | None:
    """Scan a balanced ``[...]`` on one line; None if it does not close."""
    depth = 0
    code_len = len(code)
    i = pos
    while i < code_len:
        char = code[i]
        if char == "\n":
            return None
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return i + 1
        elif char == '"':
            i = scan_quoted(code, i)
            continue
        i += 1
    return None


def _scan_prefixed_string(code: str, pos: int) -> int | None:
    """Scan ``@"..."``, ``$"..."``, ``$@"..."`` or ``@$"..."``; None otherwise."""
    if code.startswith(('$@"', '@$"'), pos):
        return _scan_verbatim(code, pos + 2)
    if code.startswith('@"', pos):
        return _scan_verbatim(code, pos + 1)
    if code.startswith('$"', pos):
        return scan_quoted(code, pos + 1)
    return None


def _scan_verbatim(code: str, quote_pos: int) -> int:
    """Scan a verbatim string body; ``""`` is an escaped quote, newlines allowed."""
    code_len = len(code)
    i = quote_pos + 1
    while i < code_len:
        if code[i] == '"':
            if code.startswith('""', i):
                i += 2
                continue
            return i + 1
        i += 1
    return code_len


def _scan_number(code: str, pos: int) -> int:
    code_len = len(code)
    if code[pos] == "0" and pos + 1 < code_len and code[pos + 1] in "xX":
        end = scan_while(code, pos + 2, HEX_DIGITS | {"_"})
    elif code[pos] == "0" and pos + 1 < code_len and code[pos + 1] in "bB":
        end = scan_while(code, pos + 2, "01_")
    else:
        end = scan_while(code, pos, DIGITS | {".", "_"})
        if end < code_len and code[end] in "eE":
            exp = end + 1
            if exp < code_len and code[exp] in "+-":
                exp += 1
            if exp < code_len and code[exp] in DIGITS:
                end = scan_while(code, exp, DIGITS | {"_"})
    if end < code_len and code[end] in _SUFFIXES:
        end += 1
        if end < code_len and code[end] in _SECOND_SUFFIXES:
            end += 1
    return end


def _has_generic_args(code: str, pos: int) -> bool:
    """Check for balanced ``<...>`` type arguments starting at pos, on one line."""
    if pos >= len(code) or code[pos] != "<":
        return False
    depth = 0
    for i in range(pos, len(code)):
        char = code[i]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return i > pos + 1
        elif char not in _GENERIC_CHARS:
            return False
    return False


def _classify_word(word: str, code: str, end: int) -> SpanKind:
    if word in KEYWORDS or word in DECLARATION_KEYWORDS or word in TYPE_KEYWORDS:
        return SpanKind.KEYWORD
    if word in VALUE_KEYWORDS:
        return SpanKind.LITERAL
    if word[0].isupper() or _has_generic_args(code, end):
        return SpanKind.TITLE
    if next_non_space(code, end) == "(":
        return SpanKind.FUNCTION
    return SpanKind.TEXT
