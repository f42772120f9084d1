"""ATX heading classifier mixin."""

from mdpreview.tokens import Token, TokenType

MAX_HEADING_LEVEL = 6


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_heading(self, line: str, lineno: int) -> Token | None:
        """Try to classify a line as an ATX heading.

        Headings start at column 0 with 1-6 ``#`` characters, followed by
        whitespace and non-empty content. Seven or more ``#`` is not a heading.

        Args:
            line: Raw line
            lineno: 1-based line number

        Returns:
            HEADING token if valid, None otherwise.
        """
        level = 0
        line_len = len(line)
        while level < line_len and line[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        rest = line[level:]
        if not rest[:1].isspace():
            return None

        content = rest.strip()
        if not content:
            return None

        return Token(TokenType.HEADING, content, lineno, level=level)
