"""Recursive descent parser producing a typed AST.

Consumes the token sequence from Lexer and builds immutable AST nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (paragraphs, lists, tables)

Blockquotes are parsed by a fresh Lexer/Parser pair one level deeper.

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (context-local)

"""

from __future__ import annotations

from collections.abc import Iterable

from mdpreview.config import ParseConfig, get_parse_config
from mdpreview.lexer import Lexer
from mdpreview.nodes import Block, Document, Paragraph
from mdpreview.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from mdpreview.tokens import Token, TokenType
from mdpreview.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for markdown tokens.

    Usage:
            >>> tokens = list(Lexer("# Hello\\n\\nWorld").tokenize())
            >>> doc = Parser(tokens).parse()
            >>> doc.children[0]
        Heading(level=1, children=(Text(content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_depth",
    )

    def __init__(self, tokens: Iterable[Token], *, depth: int = 0) -> None:
        """Initialize parser with a token sequence.

        Args:
            tokens: Tokens from Lexer.tokenize()
            depth: Blockquote nesting depth of this token sequence
        """
        self._tokens: list[Token] = list(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current: Token | None = self._tokens[0] if self._tokens else None
        self._depth = depth

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (context-local)."""
        return get_parse_config()

    def parse(self) -> Document:
        """Parse the token sequence into a Document.

        Blank lines are skipped. Each remaining token starts exactly one
        block, and the cursor only moves forward.
        """
        children: list[Block] = []
        while not self._at_end():
            if self._at(TokenType.BLANK_LINE):
                self._advance()
                continue
            block = self._parse_block()
            if block is not None:
                children.append(block)
        return Document(children=tuple(children))

    def _parse_nested(self, source: str) -> tuple[Block, ...]:
        """Parse blockquote content as a document one level deeper.

        Past the configured depth limit the content is kept as a single
        paragraph instead of being parsed structurally.
        """
        depth = self._depth + 1
        if depth > self._config.max_quote_depth:
            logger.debug("Blockquote depth %d exceeds limit; keeping text", depth)
            return (Paragraph(children=self._parse_inline(source)),)

        tokens = Lexer(source).tokenize()
        return Parser(tokens, depth=depth).parse().children
