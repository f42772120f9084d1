"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mdpreview.lexer import Lexer
from mdpreview.tokens import TokenType

# Characters that make up most markdown syntax, plus some letters
MARKDOWN_ALPHABET = "#>-*+_|:[]^()!`x 0123456789.\t\n"


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_tokenize_is_total(self, source: str) -> None:
        """Any string tokenizes without raising and yields at least one token."""
        tokens = list(Lexer(source).tokenize())
        assert len(tokens) >= 1

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=400))
    @settings(max_examples=200)
    def test_deterministic(self, source: str) -> None:
        """Tokenizing the same source twice gives equal tokens."""
        first = list(Lexer(source).tokenize())
        second = list(Lexer(source).tokenize())
        assert first == second

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=400))
    @settings(max_examples=200)
    def test_line_numbers_strictly_increase(self, source: str) -> None:
        """Each line is classified once, so token lines only move forward."""
        tokens = list(Lexer(source).tokenize())
        linenos = [t.lineno for t in tokens]

        assert linenos[0] == 1
        assert all(a < b for a, b in zip(linenos, linenos[1:], strict=False))
        assert linenos[-1] <= source.count("\n") + 1

    @given(st.text(alphabet="abc \n", max_size=300))
    @settings(max_examples=100)
    def test_plain_lines_map_one_to_one(self, source: str) -> None:
        """Without markdown syntax there is exactly one token per line."""
        tokens = list(Lexer(source).tokenize())
        assert len(tokens) == source.count("\n") + 1
        for token in tokens:
            assert token.type in {TokenType.TEXT, TokenType.BLANK_LINE}


class TestSpecialCharacterHandling:
    """Test handling of special markdown characters."""

    @given(st.text(alphabet="`\nx ", max_size=100))
    @settings(max_examples=100)
    def test_backtick_combinations(self, source: str) -> None:
        """Unbalanced fences never crash and never lose lines."""
        tokens = list(Lexer(source).tokenize())
        assert tokens

    @given(st.text(alphabet="|-: a\n", max_size=200))
    @settings(max_examples=100)
    def test_table_combinations(self, source: str) -> None:
        """Table rows always have string cells."""
        for token in Lexer(source).tokenize():
            if token.type == TokenType.TABLE:
                assert all(isinstance(cell, str) for cell in token.header)
                for row in token.rows:
                    assert all(isinstance(cell, str) for cell in row)

    @given(st.integers(min_value=0, max_value=12), st.sampled_from(["-", "*", "+", "1."]))
    def test_list_indent_is_leading_space_count(self, spaces: int, marker: str) -> None:
        """List indentation equals the number of leading spaces."""
        (token,) = Lexer(" " * spaces + f"{marker} item").tokenize()
        assert token.type == TokenType.LIST_ITEM
        assert token.indent == spaces
