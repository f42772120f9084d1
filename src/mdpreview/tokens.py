"""Token and TokenType definitions for the mdpreview lexer.

The lexer produces a sequence of Token objects that the parser consumes.
There is one token per logical line, except fenced code blocks and tables,
which fold a run of physical lines into a single token.

Each Token carries its type, the payload fields meaningful for that type
and the 1-based line number where it starts. Unused payload fields keep
their defaults.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Payload fields used by each type:
    - BLANK_LINE, HORIZONTAL_RULE: none
    - HEADING: level, content
    - LIST_ITEM: indent, ordered, content
    - CHECKLIST_ITEM: indent, checked, content
    - CODE_BLOCK: language, content
    - QUOTE: content
    - TABLE: header, rows
    - FOOTNOTE_DEF: identifier, content
    - TEXT: content

    """

    # Document structure
    BLANK_LINE = auto()

    # Single-line blocks
    HEADING = auto()  # # Heading
    HORIZONTAL_RULE = auto()  # ---, ***, ___
    QUOTE = auto()  # > text
    FOOTNOTE_DEF = auto()  # [^id]: text

    # List items
    LIST_ITEM = auto()  # - item, * item, + item, 1. item
    CHECKLIST_ITEM = auto()  # - [ ] item, - [x] item

    # Multi-line blocks
    CODE_BLOCK = auto()  # ```lang ... ```
    TABLE = auto()  # | a | b | + separator + rows

    # Paragraph text
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        content: Text payload (heading text, item text, code, quote text, ...)
        lineno: Start line number (1-indexed)
        level: Heading level 1-6
        indent: Indentation width of a list item (tabs expand to 4)
        ordered: True for numbered list items
        checked: True for ``[x]`` checklist items
        language: Fence info string of a code block
        identifier: Footnote identifier
        header: Header cell strings of a table
        rows: Body rows of a table, each a tuple of cell strings

    """

    type: TokenType
    content: str = ""
    lineno: int = 0
    level: int = 0
    indent: int = 0
    ordered: bool = False
    checked: bool = False
    language: str = ""
    identifier: str = ""
    header: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, line {self.lineno})"
