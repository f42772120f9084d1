"""
mdpreview: markdown to HTML for live preview panes.

A small markdown compiler: a line tokenizer, a recursive-descent parser
producing a typed AST, an HTML renderer with footnotes and copyable code
blocks, and built-in syntax highlighting for JavaScript, CSS, HTML and C#.
Zero runtime dependencies.

Quick Start:
    >>> from mdpreview import to_html
    >>> print(to_html("# Hello, World!"))
    <h1>Hello, World!</h1>

    >>> # Step by step
    >>> from mdpreview import parse, render, tokenize
    >>> doc = parse(tokenize("Hello **World**"))
    >>> render(doc)
    '<p>Hello <strong>World</strong></p>\\n'

    >>> # Or use the guarded Markdown class, which never raises
    >>> from mdpreview import Markdown
    >>> md = Markdown()
    >>> html = md("# Hello **World**")

Installation:
    pip install mdpreview
"""

from collections.abc import Iterable

from mdpreview.config import (
    DEFAULT_ERROR_MESSAGE,
    ParseConfig,
    RenderConfig,
    get_parse_config,
    get_render_config,
    parse_config_context,
    render_config_context,
    reset_parse_config,
    reset_render_config,
    set_parse_config,
    set_render_config,
)
from mdpreview.errors import MdPreviewError, RenderError
from mdpreview.highlighting import (
    Highlighter,
    get_highlighter,
    highlight,
    supports_language,
)
from mdpreview.lexer import Lexer
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
    TableCell,
    TableRow,
    Text,
)
from mdpreview.parser import Parser
from mdpreview.renderers.html import HtmlRenderer
from mdpreview.stats import (
    DocumentStats,
    calculate_stats,
    format_char_count,
    format_reading_time,
    format_word_count,
)
from mdpreview.tokens import Token, TokenType
from mdpreview.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize markdown source into line tokens.

    Args:
        source: Markdown source text

    Returns:
        Tokens in source order

    Example:
        >>> tokenize("# Title")
        (Token(HEADING, 'Title', line 1),)
    """
    return tuple(Lexer(source).tokenize())


def parse(tokens: str | Iterable[Token]) -> Document:
    """Parse tokens into a typed AST.

    Args:
        tokens: Tokens from tokenize(). A string is tokenized first.

    Returns:
        Document AST root node

    Example:
        >>> doc = parse(tokenize("# Hello **World**"))
        >>> doc.children[0].level
        1
    """
    if isinstance(tokens, str):
        tokens = Lexer(tokens).tokenize()
    return Parser(tokens).parse()


def render(doc: Document) -> str:
    """Render an AST Document to HTML.

    Args:
        doc: Document AST to render

    Returns:
        HTML string

    Example:
        >>> render(parse("# Hello"))
        '<h1>Hello</h1>\\n'
    """
    return HtmlRenderer().render(doc)


def to_html(source: str) -> str:
    """Compile markdown source to HTML: tokenize, parse, render.

    Errors propagate; use ``Markdown`` for the guarded variant.
    """
    return render(parse(tokenize(source)))


class Markdown:
    """High-level markdown compiler combining lexer, parser and renderer.

    Calling an instance is the pipeline's error boundary: whitespace-only
    input yields an empty string, and any unexpected failure is logged and
    replaced by the configured error message. Partial output is never
    returned.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>\\n'

        >>> # Access the AST
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

        >>> # Custom render settings
        >>> md = Markdown(render_config=RenderConfig(copy_button_label="Copy"))

    Thread Safety:
        Uses ContextVar for context-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_parse_config", "_render_config", "_renderer")

    def __init__(
        self,
        *,
        parse_config: ParseConfig | None = None,
        render_config: RenderConfig | None = None,
    ) -> None:
        """Initialize Markdown compiler.

        Args:
            parse_config: Parser settings (defaults if None)
            render_config: Renderer settings (defaults if None)
        """
        self._parse_config = parse_config or ParseConfig()
        self._render_config = render_config or RenderConfig()
        self._renderer = HtmlRenderer()

    @property
    def parse_config(self) -> ParseConfig:
        return self._parse_config

    @property
    def render_config(self) -> RenderConfig:
        return self._render_config

    def __call__(self, source: str) -> str:
        """Compile markdown to HTML without raising.

        Args:
            source: Markdown source text

        Returns:
            HTML string, ``""`` for blank input, or the configured error
            message if compilation failed
        """
        if not source or not source.strip():
            return ""

        try:
            return self.render(self.parse(source))
        except Exception:
            logger.error("Failed to compile markdown (%d chars)", len(source), exc_info=True)
            return self._render_config.error_message

    def parse(self, source: str) -> Document:
        """Parse markdown source into AST with this instance's parse config."""
        with parse_config_context(self._parse_config):
            return Parser(Lexer(source).tokenize()).parse()

    def render(self, doc: Document) -> str:
        """Render AST to HTML with this instance's render config."""
        with render_config_context(self._render_config):
            return self._renderer.render(doc)


__all__ = [
    # Main API
    "parse",
    "render",
    "to_html",
    "tokenize",
    "Markdown",
    # Lexer / parser / renderer
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "Token",
    "TokenType",
    # Configuration
    "DEFAULT_ERROR_MESSAGE",
    "ParseConfig",
    "RenderConfig",
    "get_parse_config",
    "get_render_config",
    "parse_config_context",
    "render_config_context",
    "reset_parse_config",
    "reset_render_config",
    "set_parse_config",
    "set_render_config",
    # Errors
    "MdPreviewError",
    "RenderError",
    # Highlighting
    "Highlighter",
    "get_highlighter",
    "highlight",
    "supports_language",
    # Statistics
    "DocumentStats",
    "calculate_stats",
    "format_char_count",
    "format_reading_time",
    "format_word_count",
    # Block nodes
    "Block",
    "BlockQuote",
    "Checklist",
    "ChecklistItem",
    "CodeBlock",
    "Document",
    "FootnoteDef",
    "Heading",
    "HorizontalRule",
    "List",
    "ListItem",
    "Paragraph",
    "Table",
    "TableCell",
    "TableRow",
    # Inline nodes
    "CodeSpan",
    "Emphasis",
    "FootnoteRef",
    "Image",
    "Inline",
    "LineBreak",
    "Link",
    "Strong",
    "Text",
    # Version
    "__version__",
]
