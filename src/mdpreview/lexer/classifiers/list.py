"""List and checklist item classifier mixin."""

import re

from mdpreview.tokens import Token, TokenType

# Leading whitespace, bullet, whitespace, [ ]/[x]/[X], whitespace, content
_CHECKLIST_RE = re.compile(r"(\s*)[-*+]\s+\[([ xX])\]\s+(.+)$")
_BULLET_RE = re.compile(r"(\s*)[-*+]\s+(.+)$")
_ORDERED_RE = re.compile(r"(\s*)\d+\.\s+(.+)$")


class ListClassifierMixin:
    """Mixin providing list item classification.

    Checklist items are tried before plain list items, since every
    checklist line also matches the bullet pattern.
    """

    def _calc_indent(self, line: str) -> tuple[int, int]:
        """Calculate indent level and content start. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_checklist_item(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as a checklist item (``- [ ] task``)."""
        match = _CHECKLIST_RE.match(line)
        if match is None:
            return None

        indent, _ = self._calc_indent(match.group(1))
        return Token(
            TokenType.CHECKLIST_ITEM,
            match.group(3),
            lineno,
            indent=indent,
            checked=match.group(2) in "xX",
        )

    def _try_classify_list_item(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as a bullet or numbered list item.

        Args:
            line: Raw line, including its indentation
            lineno: 1-based line number

        Returns:
            LIST_ITEM token with indent and ordered flag, or None.
        """
        ordered = False
        match = _BULLET_RE.match(line)
        if match is None:
            match = _ORDERED_RE.match(line)
            if match is None:
                return None
            ordered = True

        indent, _ = self._calc_indent(match.group(1))
        return Token(
            TokenType.LIST_ITEM,
            match.group(2),
            lineno,
            indent=indent,
            ordered=ordered,
        )
