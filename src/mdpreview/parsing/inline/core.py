"""Core inline parsing for the mdpreview parser.

Scans a string left to right. At each trigger character the rule table is
consulted; characters that start no match accumulate into a pending text
run, flushed when a rule matches or the string ends.

Thread Safety:
All functions are stateless. The rule table is immutable.

"""

from functools import cache

from mdpreview.nodes import Inline, Text
from mdpreview.parsing.inline.rules import INLINE_RULES, TRIGGER_CHARS, InlineRule


@cache
def _trigger_chars(rules: tuple[InlineRule, ...]) -> frozenset[str]:
    """Characters that can start any rule of a table."""
    if rules is INLINE_RULES:
        return TRIGGER_CHARS
    return frozenset("".join(rule.triggers for rule in rules))


def parse_inline(
    text: str,
    rules: tuple[InlineRule, ...] = INLINE_RULES,
) -> tuple[Inline, ...]:
    """Parse inline markdown into a tuple of inline nodes.

    Args:
        text: Inline source (may span several lines)
        rules: Ordered rule table; the first matching rule wins

    Returns:
        Inline nodes in source order. Adjacent plain characters form one Text.

    Example:
        >>> parse_inline("a **b** c")
        (Text(content='a '), Strong(children=(Text(content='b'),)), Text(content=' c'))
    """
    nodes: list[Inline] = []
    pos = 0
    text_start = 0
    text_len = len(text)
    triggers = _trigger_chars(rules)

    def parse(inner: str) -> tuple[Inline, ...]:
        return parse_inline(inner, rules)

    while pos < text_len:
        char = text[pos]
        if char not in triggers:
            pos += 1
            continue

        for rule in rules:
            if char not in rule.triggers:
                continue
            match = rule.pattern.match(text, pos)
            if match is not None:
                break
        else:
            pos += 1
            continue

        if text_start < pos:
            nodes.append(Text(text[text_start:pos]))
        nodes.append(rule.build(match, parse))
        pos = match.end()
        text_start = pos

    if text_start < text_len:
        nodes.append(Text(text[text_start:]))

    return tuple(nodes)


class InlineParsingMixin:
    """Mixin exposing inline parsing to the block parser."""

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Parse inline content of a block."""
        return parse_inline(text)
