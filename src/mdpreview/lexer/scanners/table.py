"""Table scanner mixin."""

import re

from mdpreview.tokens import Token, TokenType

# | --- | :--: | ---: |
_SEPARATOR_RE = re.compile(r"\s*\|(?:\s*:?-+:?\s*\|)+\s*$")


def split_cells(line: str) -> tuple[str, ...]:
    """Split a table row into stripped cell strings.

    The outer pipes are dropped; inner pipes separate cells.

    Examples:
        >>> split_cells("| a | b |")
        ('a', 'b')
    """
    inner = line.strip()[1:-1]
    return tuple(cell.strip() for cell in inner.split("|"))


class TableScannerMixin:
    """Mixin providing table scanning.

    A table is a header row, a separator row on the very next line, and
    every following line that is itself a table row. Without a separator
    the header line falls back to plain text.

    """

    # These will be set by the Lexer class
    _lines: list[str]
    _index: int
    _line_count: int

    def _is_table_row(self, line: str) -> bool:
        """Check if line is a pipe-delimited table row (``| ... |``)."""
        stripped = line.strip()
        return len(stripped) >= 2 and stripped[0] == "|" and stripped[-1] == "|"

    def _is_table_separator(self, line: str) -> bool:
        """Check if line is a table separator row (``|---|:--:|``)."""
        return _SEPARATOR_RE.match(line) is not None

    def _scan_table(self, line: str, lineno: int) -> Token:
        """Consume a table starting at an already-consumed header line.

        Args:
            line: The header row
            lineno: 1-based line number of the header row

        Returns:
            TABLE token, or TEXT for the header line when no separator follows.
        """
        if self._index >= self._line_count or not self._is_table_separator(
            self._lines[self._index]
        ):
            return Token(TokenType.TEXT, line, lineno)

        # Skip separator
        self._index += 1

        rows: list[tuple[str, ...]] = []
        while self._index < self._line_count and self._is_table_row(self._lines[self._index]):
            rows.append(split_cells(self._lines[self._index]))
            self._index += 1

        return Token(
            TokenType.TABLE,
            lineno=lineno,
            header=split_cells(line),
            rows=tuple(rows),
        )
