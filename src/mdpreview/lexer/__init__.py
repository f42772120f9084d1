"""Line-classifying lexer for mdpreview.

Usage:
    >>> from mdpreview.lexer import Lexer
    >>> tokens = list(Lexer("# Title").tokenize())
"""

from mdpreview.lexer.core import Lexer

__all__ = ["Lexer"]
