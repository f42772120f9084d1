"""Block parsing subsystem for the mdpreview parser.

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch, headings, paragraphs, code, quotes, tables, footnotes
- list: Indentation-driven list nesting and checklists

"""

from mdpreview.parsing.blocks.core import BlockParsingCoreMixin
from mdpreview.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested(source) -> tuple[Block, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
]
