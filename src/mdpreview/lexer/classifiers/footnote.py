"""Footnote definition classifier mixin."""

import re

from mdpreview.tokens import Token, TokenType

# [^identifier]: content
_FOOTNOTE_DEF_RE = re.compile(r"\[\^([^\]]+)\]:\s*(.+)$")


class FootnoteClassifierMixin:
    """Mixin providing footnote definition classification."""

    def _try_classify_footnote_def(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as a footnote definition.

        Format: ``[^identifier]: content`` at column 0. Content must be
        non-empty; a bare ``[^id]:`` line stays plain text.

        Returns:
            FOOTNOTE_DEF token if valid, None otherwise.
        """
        if not line.startswith("[^"):
            return None

        match = _FOOTNOTE_DEF_RE.match(line)
        if match is None:
            return None

        return Token(
            TokenType.FOOTNOTE_DEF,
            match.group(2),
            lineno,
            identifier=match.group(1),
        )
