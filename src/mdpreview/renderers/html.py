"""HTML renderer using StringBuilder pattern.

Renders typed AST to an HTML fragment with O(n) performance.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

Footnotes:
Footnote definitions render as nothing in place. They are collected in
visitation order while the tree is walked, wherever they sit (including
inside blockquotes), and emitted once in a section after all other content.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdpreview.config import RenderConfig, get_render_config
from mdpreview.errors import RenderError
from mdpreview.highlighting import get_highlighter
from mdpreview.nodes import (
    Block,
    BlockQuote,
    Checklist,
    ChecklistItem,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    FootnoteDef,
    FootnoteRef,
    Heading,
    HorizontalRule,
    Image,
    Inline,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Table,
    TableRow,
    Text,
)
from mdpreview.stringbuilder import StringBuilder
from mdpreview.utils.logger import get_logger
from mdpreview.utils.text import escape_html

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call; discarded afterwards.

    Attributes:
        config: Render configuration captured when the render started
        footnotes: Footnote definitions by identifier, in visitation order.
            The first definition of an identifier wins.
    """

    config: RenderConfig
    footnotes: dict[str, FootnoteDef] = field(default_factory=dict)


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
            >>> renderer = HtmlRenderer()
            >>> renderer.render(Document(children=(Paragraph(children=(Text("hi"),)),)))
            '<p>hi</p>\\n'

    Configuration (highlighting, copy button label) is read from the
    render ContextVar at the start of each render() call.

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Args:
            node: Document AST root

        Returns:
            HTML string

        Raises:
            RenderError: If node is not a Document
        """
        if not isinstance(node, Document):
            raise RenderError("HtmlRenderer.render() expects a Document", node)

        ctx = RenderContext(config=get_render_config())
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb, ctx)

        if ctx.footnotes:
            self._render_footnotes_section(sb, ctx)

        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a block node. Unknown nodes render as nothing."""
        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.children, sb, ctx)
                sb.append(f"</h{block.level}>\n")
            case HorizontalRule():
                sb.append('<hr class="md-divider" />\n')
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb, ctx)
                sb.append("</p>\n")
            case List():
                self._render_list(block, sb, ctx)
            case Checklist():
                sb.append('<ul class="checklist">\n')
                for item in block.items:
                    self._render_checklist_item(item, sb, ctx)
                sb.append("</ul>\n")
            case BlockQuote():
                sb.append("<blockquote>\n")
                for child in block.children:
                    self._render_block(child, sb, ctx)
                sb.append("</blockquote>\n")
            case CodeBlock():
                self._render_code_block(block, sb, ctx)
            case Table():
                self._render_table(block, sb, ctx)
            case FootnoteDef():
                ctx.footnotes.setdefault(block.identifier, block)
            case Document():
                for child in block.children:
                    self._render_block(child, sb, ctx)
            case ListItem():
                # Should be rendered by list, but handle standalone
                self._render_list_item(block, sb, ctx)
            case ChecklistItem():
                self._render_checklist_item(block, sb, ctx)

    def _render_list(self, lst: List, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render ordered or unordered list."""
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>\n")
        for item in lst.items:
            self._render_list_item(item, sb, ctx)
        sb.append(f"</{tag}>\n")

    def _render_list_item(self, item: ListItem, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render list item; nested lists follow the item's own text."""
        sb.append("<li>")
        self._render_inlines(item.children, sb, ctx)
        if item.sublists:
            sb.append("\n")
            for sublist in item.sublists:
                self._render_list(sublist, sb, ctx)
        sb.append("</li>\n")

    def _render_checklist_item(
        self, item: ChecklistItem, sb: StringBuilder, ctx: RenderContext
    ) -> None:
        checked = " checked" if item.checked else ""
        sb.append(
            f'<li class="checklist-item{checked}"><input type="checkbox"{checked} disabled />'
        )
        self._render_inlines(item.children, sb, ctx)
        sb.append("</li>\n")

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render fenced code with its copy button.

        The copy button carries the escaped raw code for the clipboard;
        the visible code is highlighted when the language is known.
        """
        escaped = escape_html(code.code)
        content = escaped
        if ctx.config.highlight and code.language:
            highlighter = get_highlighter(code.language)
            if highlighter is not None:
                content = highlighter.highlight(code.code)
            else:
                logger.debug("No highlighter for language %r", code.language)

        lang_class = f' class="language-{escape_html(code.language)}"' if code.language else ""

        sb.append('<div class="code-block-wrapper">')
        sb.append(f'<button class="code-copy-btn" type="button" data-code="{escaped}">')
        sb.append_escaped(ctx.config.copy_button_label).append("</button>")
        sb.append(f"<pre><code{lang_class}>").append(content).append("</code></pre>")
        sb.append("</div>\n")

    def _render_table(self, table: Table, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render table."""
        sb.append("<table>\n<thead>\n")
        self._render_table_row(table.head, "th", sb, ctx)
        sb.append("</thead>\n<tbody>\n")
        for row in table.body:
            self._render_table_row(row, "td", sb, ctx)
        sb.append("</tbody>\n</table>\n")

    def _render_table_row(
        self, row: TableRow, cell_tag: str, sb: StringBuilder, ctx: RenderContext
    ) -> None:
        sb.append("<tr>")
        for cell in row.cells:
            sb.append(f"<{cell_tag}>")
            self._render_inlines(cell.children, sb, ctx)
            sb.append(f"</{cell_tag}>")
        sb.append("</tr>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(
        self, inlines: tuple[Inline, ...], sb: StringBuilder, ctx: RenderContext
    ) -> None:
        """Render a sequence of inline nodes."""
        for inline in inlines:
            self._render_inline(inline, sb, ctx)

    def _render_inline(self, inline: Inline, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render an inline node. Unknown nodes render as nothing."""
        match inline:
            case Text():
                sb.append_escaped(inline.content)
            case Strong():
                sb.append("<strong>")
                self._render_inlines(inline.children, sb, ctx)
                sb.append("</strong>")
            case Emphasis():
                sb.append("<em>")
                self._render_inlines(inline.children, sb, ctx)
                sb.append("</em>")
            case CodeSpan():
                sb.append("<code>").append_escaped(inline.code).append("</code>")
            case Link():
                href = escape_html(inline.url)
                sb.append(f'<a href="{href}">').append_escaped(inline.text).append("</a>")
            case Image():
                src = escape_html(inline.url)
                alt = escape_html(inline.alt)
                sb.append(f'<img src="{src}" alt="{alt}" />')
            case LineBreak():
                sb.append("<br />\n")
            case FootnoteRef():
                esc_id = escape_html(inline.identifier)
                sb.append(
                    f'<sup class="footnote-ref"><a href="#fn-{esc_id}" id="fnref-{esc_id}">'
                    f"[{esc_id}]</a></sup>"
                )

    # =========================================================================
    # Footnotes
    # =========================================================================

    def _render_footnotes_section(self, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render collected footnotes after the main content."""
        sb.append('<hr class="footnotes-separator" />\n')
        sb.append('<section class="footnotes-section">\n')
        for identifier, fn_def in ctx.footnotes.items():
            esc_id = escape_html(identifier)
            sb.append(f'<div class="footnote" id="fn-{esc_id}"><sup>{esc_id}</sup> ')
            self._render_inlines(fn_def.children, sb, ctx)
            sb.append(f' <a href="#fnref-{esc_id}" class="footnote-backref">↩</a></div>\n')
        sb.append("</section>\n")
