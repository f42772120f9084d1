"""StringBuilder for O(n) markup accumulation.

Parts go into a list that is joined once at the end. Markup and text are
appended through separate methods: ``append`` takes trusted markup as is,
``append_escaped`` escapes user text first. Keeping the two apart makes it
easy to see which pieces of the output can carry raw HTML.

Thread Safety:
StringBuilder instances are local to each render() or highlight() call.
No shared mutable state.

"""

from __future__ import annotations

from mdpreview.utils.text import escape_html


class StringBuilder:
    """Markup accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<code>").append_escaped("a < b").append("</code>")
            >>> sb.build()
            '<code>a &lt; b</code>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, markup: str) -> StringBuilder:
        """Append trusted markup (empty strings are skipped) and return self."""
        if markup:
            self._parts.append(markup)
        return self

    def append_escaped(self, text: str) -> StringBuilder:
        """Append HTML-escaped text and return self."""
        if text:
            self._parts.append(escape_html(text))
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
