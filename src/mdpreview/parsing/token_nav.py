"""Token cursor for the mdpreview parser.

The parser only ever moves forward, one token at a time, and most blocks
are runs of same-typed tokens (paragraph lines, quote lines, checklist
items). The mixin below covers both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdpreview.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing a forward-only token cursor.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int
        - _pos: int
        - _current: Token | None (None once the tokens are exhausted)

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _at_end(self) -> bool:
        return self._current is None

    def _advance(self) -> Token | None:
        """Move to the next token and return it (None past the end)."""
        self._pos += 1
        self._current = self._tokens[self._pos] if self._pos < self._tokens_len else None
        return self._current

    def _at(self, token_type: TokenType) -> bool:
        """Check if the current token has the given type."""
        return self._current is not None and self._current.type is token_type

    def _take_run(self, token_type: TokenType) -> list[Token]:
        """Consume consecutive tokens of one type and return them.

        Returns an empty list if the current token has another type.
        """
        run: list[Token] = []
        while self._at(token_type):
            run.append(self._current)
            self._advance()
        return run
