"""Horizontal rule classifier mixin."""

from mdpreview.tokens import Token, TokenType

_RULES = frozenset({"---", "***", "___"})


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_horizontal_rule(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as a horizontal rule.

        Exactly three ``-``, ``*`` or ``_`` with optional surrounding
        whitespace. Longer or spaced runs are not rules.
        """
        if line.strip() not in _RULES:
            return None
        return Token(TokenType.HORIZONTAL_RULE, lineno=lineno)
