"""Core block parsing for the mdpreview parser.

Handles block dispatch and the single-token and run-of-token blocks:
headings, rules, paragraphs, code blocks, blockquotes, tables and
footnote definitions.

"""

from mdpreview.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    FootnoteDef,
    Heading,
    HorizontalRule,
    Inline,
    Paragraph,
    Table,
    TableCell,
    TableRow,
)
from mdpreview.tokens import Token, TokenType


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _take_run(token_type) -> list[Token]
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested(source) -> tuple[Block, ...]
        - _parse_list() -> List
        - _parse_checklist() -> Checklist

    """

    _current: Token | None

    def _parse_block(self) -> Block | None:
        """Parse one block starting at the current token.

        Always consumes at least one token. Returns None for tokens that
        produce no node.
        """
        token = self._current
        if token is None:
            return None

        match token.type:
            case TokenType.HEADING:
                return self._parse_heading(token)
            case TokenType.HORIZONTAL_RULE:
                self._advance()
                return HorizontalRule()
            case TokenType.LIST_ITEM:
                return self._parse_list()
            case TokenType.CHECKLIST_ITEM:
                return self._parse_checklist()
            case TokenType.CODE_BLOCK:
                self._advance()
                return CodeBlock(language=token.language, code=token.content)
            case TokenType.QUOTE:
                return self._parse_blockquote()
            case TokenType.TABLE:
                return self._parse_table(token)
            case TokenType.FOOTNOTE_DEF:
                self._advance()
                return FootnoteDef(
                    identifier=token.identifier,
                    children=self._parse_inline(token.content),
                )
            case TokenType.TEXT:
                return self._parse_paragraph()
            case _:
                self._advance()
                return None

    def _parse_heading(self, token: Token) -> Heading:
        """Parse a heading token."""
        self._advance()
        return Heading(level=token.level, children=self._parse_inline(token.content))

    def _parse_paragraph(self) -> Paragraph:
        """Parse consecutive text lines into one paragraph.

        Lines are joined with newlines so that two trailing spaces still
        produce a line break. Any non-text token, including a blank line,
        ends the paragraph.
        """
        lines = [token.content for token in self._take_run(TokenType.TEXT)]
        return Paragraph(children=self._parse_inline("\n".join(lines)))

    def _parse_blockquote(self) -> BlockQuote:
        """Parse consecutive quote lines as a nested document.

        The quoted text is tokenized and parsed again from scratch, so a
        quote may contain headings, lists, code and further quotes.
        """
        lines = [token.content for token in self._take_run(TokenType.QUOTE)]
        return BlockQuote(children=self._parse_nested("\n".join(lines)))

    def _parse_table(self, token: Token) -> Table:
        """Parse a table token; every cell goes through the inline parser."""
        self._advance()
        head = self._parse_table_row(token.header)
        body = tuple(self._parse_table_row(row) for row in token.rows)
        return Table(head=head, body=body)

    def _parse_table_row(self, cells: tuple[str, ...]) -> TableRow:
        return TableRow(
            cells=tuple(TableCell(children=self._parse_inline(cell)) for cell in cells)
        )

    # Host methods (implemented by other mixins / Parser)

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _take_run(self, token_type: TokenType) -> list[Token]:
        raise NotImplementedError

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        raise NotImplementedError

    def _parse_nested(self, source: str) -> tuple[Block, ...]:
        raise NotImplementedError
