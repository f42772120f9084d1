"""Blockquote classifier mixin."""

from mdpreview.tokens import Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing blockquote line classification."""

    def _try_classify_quote(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as a blockquote line.

        The ``>`` marker must sit at column 0. Whitespace after the marker is
        dropped; any further ``>`` stays in the content so that the nested
        parse sees it again.
        """
        if not line.startswith(">"):
            return None
        return Token(TokenType.QUOTE, line[1:].lstrip(), lineno)
