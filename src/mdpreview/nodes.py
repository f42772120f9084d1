"""Typed AST nodes for mdpreview.

All AST nodes are frozen dataclasses with slots for:
- Immutability: the renderer only reads the tree
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements dispatch on node classes

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── HorizontalRule
│   ├── Paragraph
│   ├── List
│   ├── ListItem
│   ├── Checklist
│   ├── ChecklistItem
│   ├── BlockQuote
│   ├── CodeBlock
│   ├── Table (TableRow, TableCell)
│   └── FootnoteDef
└── Inline (inline elements)
    ├── Text
    ├── Strong
    ├── Emphasis
    ├── CodeSpan
    ├── Link
    ├── Image
    ├── LineBreak
    └── FootnoteRef

Every parent exclusively owns its children: no sharing, no cycles.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text. May contain
    newlines when a paragraph spans several source lines.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. The link text is kept literal.

    Markdown: [text](url)
    HTML: <a href="url">text</a>

    """

    text: str
    url: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url)
    HTML: <img src="url" alt="alt" />

    """

    alt: str
    url: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break (two trailing spaces before a newline)."""


@dataclass(frozen=True, slots=True)
class FootnoteRef(Node):
    """Footnote reference.

    Markdown: [^1] or [^note]
    HTML: <sup class="footnote-ref"><a href="#fn-1" id="fnref-1">[1]</a></sup>

    """

    identifier: str


# PEP 695 type alias for inline elements
type Inline = (
    Text
    | Strong
    | Emphasis
    | CodeSpan
    | Link
    | Image
    | LineBreak
    | FootnoteRef
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___
    HTML: <hr class="md-divider" />

    """


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Consecutive text lines
    HTML: <p>text</p>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item with inline content and any lists nested under it.

    Markdown: - item or 1. item
    HTML: <li>item</li>

    """

    children: tuple[Inline, ...]
    sublists: tuple[List, ...] = ()


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[ListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class ChecklistItem(Node):
    """Checklist (task list) item.

    Markdown: - [ ] todo or - [x] done
    HTML: <li class="checklist-item"><input type="checkbox" disabled />todo</li>

    """

    checked: bool
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Checklist(Node):
    """A run of consecutive checklist items."""

    items: tuple[ChecklistItem, ...]


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>text</blockquote>

    Children come from parsing the quoted lines as a document of their own,
    so quotes nest and may hold any block.

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown: ```lang\\ncode\\n```
    HTML: <pre><code class="language-lang">code</code></pre>

    """

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell (th or td)."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row.

    Markdown: | cell1 | cell2 |
    HTML: <tr><td>cell1</td><td>cell2</td></tr>

    """

    cells: tuple[TableCell, ...]


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Table.

    Markdown:
        | A | B |
        |---|---|
        | 1 | 2 |

    HTML: <table>...</table>

    """

    head: TableRow
    body: tuple[TableRow, ...]


@dataclass(frozen=True, slots=True)
class FootnoteDef(Node):
    """Footnote definition.

    Markdown: [^1]: Footnote content here.
    HTML: (rendered in the footnotes section after the document)

    """

    identifier: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Document
    | Heading
    | HorizontalRule
    | Paragraph
    | List
    | ListItem
    | Checklist
    | ChecklistItem
    | BlockQuote
    | CodeBlock
    | Table
    | FootnoteDef
)
