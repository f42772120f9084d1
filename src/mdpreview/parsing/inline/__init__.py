"""Inline parsing subsystem for the mdpreview parser."""

from mdpreview.parsing.inline.core import InlineParsingMixin, parse_inline
from mdpreview.parsing.inline.rules import INLINE_RULES, InlineRule

__all__ = [
    "INLINE_RULES",
    "InlineParsingMixin",
    "InlineRule",
    "parse_inline",
]
