"""Parsing subsystem for the mdpreview parser.

The Parser class is composed from these mixins:
- TokenNavigationMixin: Token stream traversal
- InlineParsingMixin: Rule-table driven inline parsing
- BlockParsingMixin: Block-level content (paragraphs, lists, tables)
"""

from mdpreview.parsing.blocks import BlockParsingMixin
from mdpreview.parsing.inline import InlineParsingMixin
from mdpreview.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
    "TokenNavigationMixin",
]
