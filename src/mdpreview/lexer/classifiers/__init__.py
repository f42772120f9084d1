"""Line classifiers for the mdpreview lexer.

Each classifier is a mixin that decides whether a single line matches a
particular block pattern. Classifiers are pure: they never move the lexer's
line cursor. Constructs spanning several lines live in ``lexer.scanners``.
"""

from mdpreview.lexer.classifiers.footnote import FootnoteClassifierMixin
from mdpreview.lexer.classifiers.heading import HeadingClassifierMixin
from mdpreview.lexer.classifiers.list import ListClassifierMixin
from mdpreview.lexer.classifiers.quote import QuoteClassifierMixin
from mdpreview.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FootnoteClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
