"""Multi-line scanners for the mdpreview lexer.

Scanners handle the two constructs that fold several physical lines into
one token: fenced code blocks and tables. Unlike classifiers, they advance
the lexer's line cursor.
"""

from __future__ import annotations

from mdpreview.lexer.scanners.fence import FenceScannerMixin
from mdpreview.lexer.scanners.table import TableScannerMixin

__all__ = [
    "FenceScannerMixin",
    "TableScannerMixin",
]
