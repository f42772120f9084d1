"""Line-classifying lexer.

Splits the source into lines and classifies each one in a fixed priority
order. The first classifier that accepts a line wins:

1. blank line
2. horizontal rule
3. table (header + separator + rows)
4. heading
5. checklist item
6. list item
7. fenced code block
8. footnote definition
9. blockquote line
10. plain text

The order resolves overlaps: ``---`` is a rule, not a bullet; ``- [x] a``
is a checklist item, not a bullet; a fence inside a list item marker stays
list content.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdpreview.lexer.classifiers import (
    FootnoteClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from mdpreview.lexer.scanners import FenceScannerMixin, TableScannerMixin
from mdpreview.tokens import Token, TokenType
from mdpreview.utils.text import normalize_newlines


class Lexer(
    # Classifiers (pure logic, no cursor movement)
    ThematicClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    FootnoteClassifierMixin,
    QuoteClassifierMixin,
    # Scanners (consume following lines)
    TableScannerMixin,
    FenceScannerMixin,
):
    """Line-classifying lexer.

    Every iteration consumes at least one line, so tokenizing always
    terminates and never looks at a line twice.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADING, 'Hello', line 1)
        Token(BLANK_LINE, '', line 2)
        Token(TEXT, 'World', line 3)

    """

    __slots__ = (
        "_lines",
        "_index",
        "_line_count",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
        """
        self._lines = normalize_newlines(source).split("\n")
        self._index = 0
        self._line_count = len(self._lines)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects in source order.
        """
        while self._index < self._line_count:
            line = self._lines[self._index]
            self._index += 1
            yield self._classify_line(line, self._index)

    def _classify_line(self, line: str, lineno: int) -> Token:
        """Classify one consumed line, pulling in more lines for tables and fences."""
        if not line.strip():
            return Token(TokenType.BLANK_LINE, lineno=lineno)

        token = self._try_classify_horizontal_rule(line, lineno)
        if token is not None:
            return token

        if self._is_table_row(line):
            return self._scan_table(line, lineno)

        token = self._try_classify_heading(line, lineno)
        if token is not None:
            return token

        token = self._try_classify_checklist_item(line, lineno)
        if token is not None:
            return token

        token = self._try_classify_list_item(line, lineno)
        if token is not None:
            return token

        if self._is_fence(line):
            return self._scan_fenced_code(line, lineno)

        token = self._try_classify_footnote_def(line, lineno)
        if token is not None:
            return token

        token = self._try_classify_quote(line, lineno)
        if token is not None:
            return token

        return Token(TokenType.TEXT, line, lineno)

    def _calc_indent(self, line: str) -> tuple[int, int]:
        """Calculate indent level and content start position.

        Spaces count as 1, tabs expand to next multiple of 4.

        Args:
            line: Line content

        Returns:
            (indent_spaces, content_start_index)
        """
        indent = 0
        pos = 0
        line_len = len(line)
        while pos < line_len:
            char = line[pos]
            if char == " ":
                indent += 1
                pos += 1
            elif char == "\t":
                indent += 4 - (indent % 4)
                pos += 1
            elif char.isspace():
                indent += 1
                pos += 1
            else:
                break
        return indent, pos
