"""Tests for utility helpers."""

import logging

from mdpreview.stringbuilder import StringBuilder
from mdpreview.utils.logger import get_logger
from mdpreview.utils.text import escape_html, normalize_newlines


class TestEscapeHtml:
    """Test escape_html function."""

    def test_basic_escaping(self) -> None:
        """Special characters become entities."""
        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
        )

    def test_empty(self) -> None:
        """Empty input stays empty."""
        assert escape_html("") == ""

    def test_plain_text_unchanged(self) -> None:
        """Text without specials is returned as is."""
        assert escape_html("plain text") == "plain text"


class TestNormalizeNewlines:
    """Test normalize_newlines function."""

    def test_crlf_and_cr(self) -> None:
        """CRLF and lone CR both become LF."""
        assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_lf_untouched(self) -> None:
        """LF-only text is returned unchanged."""
        text = "a\nb"
        assert normalize_newlines(text) is text


class TestGetLogger:
    """Test get_logger function."""

    def test_prefix_added(self) -> None:
        """Bare names get the package prefix."""
        assert get_logger("highlighting").name == "mdpreview.highlighting"

    def test_module_names_kept(self) -> None:
        """Names already under the package are not prefixed twice."""
        assert get_logger("mdpreview.parser").name == "mdpreview.parser"
        assert get_logger("mdpreview").name == "mdpreview"

    def test_returns_stdlib_logger(self) -> None:
        """Loggers are plain standard library loggers."""
        assert isinstance(get_logger("x"), logging.Logger)


class TestStringBuilder:
    """Test StringBuilder."""

    def test_build(self) -> None:
        """Markup is kept and text is escaped, in append order."""
        sb = StringBuilder()
        sb.append("<p>").append_escaped("a < b & c").append("</p>")
        assert sb.build() == "<p>a &lt; b &amp; c</p>"

    def test_empty_parts_skipped(self) -> None:
        """Empty strings add no parts."""
        sb = StringBuilder()
        sb.append("").append_escaped("")
        assert not sb
        assert len(sb) == 0
        assert sb.build() == ""
