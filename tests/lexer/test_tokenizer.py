"""Tests for line classification in the Lexer."""

from mdpreview.lexer import Lexer
from mdpreview.tokens import Token, TokenType


def _tokens(source: str) -> list[Token]:
    return list(Lexer(source).tokenize())


def _types(source: str) -> list[TokenType]:
    return [t.type for t in Lexer(source).tokenize()]


class TestSingleLineClassification:
    """Each kind of line on its own."""

    def test_blank_line(self) -> None:
        """Whitespace-only lines are blank."""
        assert _types("   \t ") == [TokenType.BLANK_LINE]

    def test_empty_source_is_one_blank_line(self) -> None:
        """An empty string is a single empty line."""
        assert _types("") == [TokenType.BLANK_LINE]

    def test_heading_levels(self) -> None:
        """One to six hashes give the matching heading level."""
        for level in range(1, 7):
            (token,) = _tokens("#" * level + " Title")
            assert token.type == TokenType.HEADING
            assert token.level == level
            assert token.content == "Title"

    def test_seven_hashes_is_text(self) -> None:
        """Seven hashes is not a heading."""
        assert _types("####### Title") == [TokenType.TEXT]

    def test_heading_needs_space(self) -> None:
        """A hash glued to the text is not a heading."""
        assert _types("#hashtag") == [TokenType.TEXT]

    def test_heading_content_is_stripped(self) -> None:
        """Surrounding whitespace is dropped from heading text."""
        (token,) = _tokens("##   Spaced out   ")
        assert token.content == "Spaced out"

    def test_horizontal_rules(self) -> None:
        """Three dashes, stars or underscores form a rule."""
        for rule in ("---", "***", "___", "  ---  "):
            assert _types(rule) == [TokenType.HORIZONTAL_RULE], rule

    def test_longer_rule_is_not_a_rule(self) -> None:
        """Only the exact three-character forms are rules."""
        assert _types("----") == [TokenType.TEXT]

    def test_quote(self) -> None:
        """A leading > makes a quote line with the marker removed."""
        (token,) = _tokens(">   quoted text")
        assert token.type == TokenType.QUOTE
        assert token.content == "quoted text"

    def test_nested_quote_marker_stays_in_content(self) -> None:
        """Only the first > is removed."""
        (token,) = _tokens("> > inner")
        assert token.content == "> inner"

    def test_indented_quote_is_text(self) -> None:
        """The quote marker must be at column 0."""
        assert _types("  > not a quote") == [TokenType.TEXT]

    def test_footnote_definition(self) -> None:
        """[^id]: text is a footnote definition."""
        (token,) = _tokens("[^note]: The footnote text")
        assert token.type == TokenType.FOOTNOTE_DEF
        assert token.identifier == "note"
        assert token.content == "The footnote text"

    def test_footnote_definition_needs_content(self) -> None:
        """A definition with nothing after the colon is plain text."""
        assert _types("[^note]:") == [TokenType.TEXT]

    def test_text(self) -> None:
        """Anything else is text, kept verbatim."""
        (token,) = _tokens("  just some words  ")
        assert token.type == TokenType.TEXT
        assert token.content == "  just some words  "


class TestListItems:
    """List and checklist item classification."""

    def test_bullets(self) -> None:
        """-, * and + all start unordered items."""
        for marker in "-*+":
            (token,) = _tokens(f"{marker} item")
            assert token.type == TokenType.LIST_ITEM
            assert token.ordered is False
            assert token.content == "item"

    def test_ordered(self) -> None:
        """Digits and a dot start an ordered item."""
        (token,) = _tokens("12. twelfth")
        assert token.type == TokenType.LIST_ITEM
        assert token.ordered is True
        assert token.content == "twelfth"

    def test_indent_counts_spaces(self) -> None:
        """Indentation is the number of leading spaces."""
        (token,) = _tokens("   - item")
        assert token.indent == 3

    def test_tab_expands_to_four(self) -> None:
        """A tab advances to the next multiple of four."""
        (token,) = _tokens("\t- item")
        assert token.indent == 4
        (token,) = _tokens("  \t- item")
        assert token.indent == 4

    def test_checklist_unchecked(self) -> None:
        """- [ ] is an unchecked checklist item."""
        (token,) = _tokens("- [ ] todo")
        assert token.type == TokenType.CHECKLIST_ITEM
        assert token.checked is False
        assert token.content == "todo"

    def test_checklist_checked_either_case(self) -> None:
        """Both [x] and [X] are checked."""
        for mark in "xX":
            (token,) = _tokens(f"* [{mark}] done")
            assert token.type == TokenType.CHECKLIST_ITEM
            assert token.checked is True

    def test_marker_without_content_is_text(self) -> None:
        """A lone bullet is not a list item."""
        assert _types("-") == [TokenType.TEXT]


class TestPriority:
    """Overlapping syntaxes resolve by classification order."""

    def test_rule_beats_bullet(self) -> None:
        """--- is a rule, not a list item."""
        assert _types("---") == [TokenType.HORIZONTAL_RULE]

    def test_star_rule_beats_bullet(self) -> None:
        """*** is a rule, not emphasis or a list."""
        assert _types("***") == [TokenType.HORIZONTAL_RULE]

    def test_checklist_beats_bullet(self) -> None:
        """Checklist syntax wins over a plain bullet."""
        assert _types("- [x] a") == [TokenType.CHECKLIST_ITEM]

    def test_bullet_beats_fence(self) -> None:
        """A fence after a bullet marker is list content."""
        (token,) = _tokens("- ```js")
        assert token.type == TokenType.LIST_ITEM
        assert token.content == "```js"

    def test_heading_beats_footnote(self) -> None:
        """Headings are tried before anything with brackets."""
        assert _types("# [^1]: x") == [TokenType.HEADING]


class TestFencedCode:
    """Fence scanning consumes lines until the closing fence."""

    def test_fenced_block(self) -> None:
        """Lines between fences are the verbatim content."""
        (token,) = _tokens("```js\nconst a = 1;\n  indented\n```")
        assert token.type == TokenType.CODE_BLOCK
        assert token.language == "js"
        assert token.content == "const a = 1;\n  indented"

    def test_language_is_stripped(self) -> None:
        """Whitespace around the info string is dropped."""
        (token,) = _tokens("```  css  \na {}\n```")
        assert token.language == "css"

    def test_no_language(self) -> None:
        """A bare fence has an empty language."""
        (token,) = _tokens("```\nx\n```")
        assert token.language == ""

    def test_unterminated_runs_to_end(self) -> None:
        """A missing closing fence is not an error."""
        (token,) = _tokens("```\nline 1\nline 2")
        assert token.type == TokenType.CODE_BLOCK
        assert token.content == "line 1\nline 2"

    def test_markdown_inside_fence_is_verbatim(self) -> None:
        """Fence content is never classified."""
        (token,) = _tokens("```\n# not a heading\n- not a list\n```")
        assert token.content == "# not a heading\n- not a list"

    def test_tokens_after_fence(self) -> None:
        """Classification resumes after the closing fence."""
        types = _types("```\ncode\n```\n# After")
        assert types == [TokenType.CODE_BLOCK, TokenType.HEADING]

    def test_empty_block(self) -> None:
        """Adjacent fences give an empty block."""
        (token,) = _tokens("```\n```")
        assert token.content == ""


class TestTables:
    """Table scanning requires a separator on the second line."""

    def test_table(self) -> None:
        """Header, separator and rows fold into one token."""
        source = "| Name | Age |\n| --- | :---: |\n| Ana | 31 |\n| Bo | 4 |"
        (token,) = _tokens(source)
        assert token.type == TokenType.TABLE
        assert token.header == ("Name", "Age")
        assert token.rows == (("Ana", "31"), ("Bo", "4"))
        assert token.lineno == 1

    def test_header_only(self) -> None:
        """A table may have no body rows."""
        (token,) = _tokens("| a | b |\n|---|---|")
        assert token.type == TokenType.TABLE
        assert token.rows == ()

    def test_missing_separator_is_text(self) -> None:
        """Without a separator the pipe line is plain text."""
        types = _types("| a | b |\n| c | d |")
        assert types == [TokenType.TEXT, TokenType.TEXT]

    def test_table_ends_at_non_row(self) -> None:
        """The first line that is not a row ends the table."""
        types = _types("| a |\n|---|\n| 1 |\nafter")
        assert types == [TokenType.TABLE, TokenType.TEXT]


class TestLineNumbers:
    """Tokens carry the 1-based line they start on."""

    def test_line_numbers_skip_consumed_lines(self) -> None:
        """Multi-line tokens advance the line counter."""
        tokens = _tokens("# A\n```\nx\ny\n```\ntext")
        assert [t.lineno for t in tokens] == [1, 2, 6]

    def test_crlf_is_normalized(self) -> None:
        """Windows line endings split lines like LF."""
        tokens = _tokens("# A\r\ntext\r\n")
        assert [t.type for t in tokens] == [
            TokenType.HEADING,
            TokenType.TEXT,
            TokenType.BLANK_LINE,
        ]
        assert tokens[1].content == "text"

    def test_repr(self) -> None:
        """Token repr is compact."""
        (token,) = _tokens("# Title")
        assert repr(token) == "Token(HEADING, 'Title', line 1)"
