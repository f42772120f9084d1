"""Utility modules for mdpreview.

Provides:
- text: escape_html, normalize_newlines for text processing
- logger: get_logger for logging
"""

from mdpreview.utils.logger import get_logger
from mdpreview.utils.text import escape_html, normalize_newlines

__all__ = [
    "escape_html",
    "get_logger",
    "normalize_newlines",
]
