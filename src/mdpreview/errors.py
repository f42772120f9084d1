"""Exception classes for mdpreview.

Malformed markdown never raises: every ambiguous construct degrades to a
fallback (plain text, an early list end, a fence that runs to end of input).
These exceptions cover programming errors and unexpected internal failures,
which propagate to the ``Markdown`` boundary.
"""

from __future__ import annotations


class MdPreviewError(Exception):
    """Base exception for all mdpreview errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MdPreviewError):
    """Error during HTML rendering.

    Raised when the renderer is handed something that is not a Document.
    """

    def __init__(self, message: str, node: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending object (optional)
        """
        self.message = message
        self.node = node
        if node is not None:
            message = f"{message} (got {type(node).__name__})"
        super().__init__(message)
