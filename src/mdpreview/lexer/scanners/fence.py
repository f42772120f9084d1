"""Fenced code block scanner mixin."""

from mdpreview.tokens import Token, TokenType

FENCE = "```"


class FenceScannerMixin:
    """Mixin providing fenced code block scanning.

    A fence opens on any line whose stripped form starts with three
    backticks and closes on the next such line. A missing closing fence
    is not an error: the block runs to end of input.

    """

    # These will be set by the Lexer class
    _lines: list[str]
    _index: int
    _line_count: int

    def _is_fence(self, line: str) -> bool:
        """Check if line opens or closes a fenced code block."""
        return line.strip().startswith(FENCE)

    def _scan_fenced_code(self, line: str, lineno: int) -> Token:
        """Consume the lines of a fenced code block.

        Args:
            line: The opening fence line (already consumed)
            lineno: 1-based line number of the opening fence

        Returns:
            CODE_BLOCK token with language and verbatim content.
        """
        language = line.strip()[len(FENCE) :].strip()

        body: list[str] = []
        while self._index < self._line_count:
            current = self._lines[self._index]
            self._index += 1
            if self._is_fence(current):
                break
            body.append(current)

        return Token(TokenType.CODE_BLOCK, "\n".join(body), lineno, language=language)
