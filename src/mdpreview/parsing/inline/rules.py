"""Inline rule table.

Inline syntax is recognised by an ordered table of rules. At each position
of a string the rules are tried in table order and the first match wins,
so order is part of the grammar:

- ``line_break`` runs first so two trailing spaces never reach a text run
- ``image`` precedes ``link`` since ``![a](b)`` contains ``[a](b)``
- ``footnote_ref`` precedes ``link`` so ``[^1]`` is never link text
- ``**`` / ``__`` precede ``*`` / ``_`` so bold wins over nested italics

Bold and italic content is parsed again with the same table.

"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from mdpreview.nodes import (
    CodeSpan,
    Emphasis,
    FootnoteRef,
    Image,
    Inline,
    LineBreak,
    Link,
    Strong,
)

type InlineParser = Callable[[str], tuple[Inline, ...]]


@dataclass(frozen=True, slots=True)
class InlineRule:
    """One entry of the inline rule table.

    Attributes:
        name: Rule name, for debugging and tests
        triggers: Characters a match can start with; other positions skip the rule
        pattern: Compiled pattern, matched anchored at the current position
        build: Turns a match into a node; gets the inline parser for recursion

    """

    name: str
    triggers: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], InlineParser], Inline]


def _line_break(match: re.Match[str], parse: InlineParser) -> Inline:
    return LineBreak()


def _image(match: re.Match[str], parse: InlineParser) -> Inline:
    return Image(alt=match.group(1), url=match.group(2))


def _footnote_ref(match: re.Match[str], parse: InlineParser) -> Inline:
    return FootnoteRef(identifier=match.group(1))


def _link(match: re.Match[str], parse: InlineParser) -> Inline:
    return Link(text=match.group(1), url=match.group(2))


def _code(match: re.Match[str], parse: InlineParser) -> Inline:
    return CodeSpan(code=match.group(1))


def _strong(match: re.Match[str], parse: InlineParser) -> Inline:
    return Strong(children=parse(match.group(1)))


def _emphasis(match: re.Match[str], parse: InlineParser) -> Inline:
    return Emphasis(children=parse(match.group(1)))


INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule("line_break", " ", re.compile(r"  \n"), _line_break),
    InlineRule("image", "!", re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), _image),
    InlineRule("footnote_ref", "[", re.compile(r"\[\^([^\]]+)\]"), _footnote_ref),
    InlineRule("link", "[", re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), _link),
    InlineRule("code", "`", re.compile(r"`([^`]+)`"), _code),
    InlineRule("bold", "*", re.compile(r"\*\*(.+?)\*\*"), _strong),
    InlineRule("bold", "_", re.compile(r"__(.+?)__"), _strong),
    InlineRule("italic", "*", re.compile(r"\*(.+?)\*"), _emphasis),
    InlineRule("italic", "_", re.compile(r"_(.+?)_"), _emphasis),
)

# Characters that can start any rule; everything else is plain text
TRIGGER_CHARS: frozenset[str] = frozenset("".join(rule.triggers for rule in INLINE_RULES))
