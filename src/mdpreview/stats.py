"""Document statistics for markdown source.

Counts are taken on the raw source text, markup included, the way an
editor status bar shows them.

Example:
    >>> stats = calculate_stats("Hello markdown world")
    >>> format_word_count(stats.word_count)
    '3 words'
    >>> format_reading_time(stats.reading_time_minutes)
    '~1 min read'
"""

from __future__ import annotations

import math
from dataclasses import dataclass

WORDS_PER_MINUTE = 200


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Word count, character count and estimated reading time of a text."""

    word_count: int
    char_count: int
    reading_time_minutes: int


def calculate_stats(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> DocumentStats:
    """Calculate statistics for a text.

    Words are runs of non-whitespace characters. Reading time rounds up,
    so any non-empty text takes at least one minute.

    Args:
        text: Source text
        words_per_minute: Reading speed used for the estimate

    Returns:
        DocumentStats for the text

    Raises:
        ValueError: If words_per_minute is not positive
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    words = len(text.split())
    return DocumentStats(
        word_count=words,
        char_count=len(text),
        reading_time_minutes=math.ceil(words / words_per_minute),
    )


def format_reading_time(minutes: int) -> str:
    """Format reading time, e.g. ``~3 min read``."""
    return f"~{minutes} min read"


def format_word_count(count: int) -> str:
    """Format a word count with the right plural."""
    return "1 word" if count == 1 else f"{count} words"


def format_char_count(count: int) -> str:
    """Format a character count with the right plural."""
    return "1 char" if count == 1 else f"{count} chars"
