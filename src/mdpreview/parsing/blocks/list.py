"""List and checklist parsing for the mdpreview parser.

Nested lists are rebuilt from indentation with an explicit stack of open
lists. Each stack entry remembers the indentation and kind of its items:

- deeper item: open a child list under the latest item of the top list
- shallower item: close lists until the top is no deeper than the item
- same depth, other kind: the whole list ends, the item is not consumed
- shallower than the first item: the whole list ends, not consumed

At ``ParseConfig.max_list_depth`` open lists no further child list is
opened; deeper items join the innermost list whatever their kind.

The builders are mutable while the run of items is consumed and are frozen
into ``List``/``ListItem`` nodes at the end. Indentation is not kept.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdpreview.config import ParseConfig
from mdpreview.nodes import Checklist, ChecklistItem, Inline, List, ListItem
from mdpreview.tokens import Token, TokenType


@dataclass(slots=True)
class _ItemBuilder:
    children: tuple[Inline, ...]
    sublists: list[_ListBuilder] = field(default_factory=list)

    def freeze(self) -> ListItem:
        return ListItem(
            children=self.children,
            sublists=tuple(sub.freeze() for sub in self.sublists),
        )


@dataclass(slots=True)
class _ListBuilder:
    indent: int
    ordered: bool
    items: list[_ItemBuilder] = field(default_factory=list)

    def freeze(self) -> List:
        return List(
            items=tuple(item.freeze() for item in self.items),
            ordered=self.ordered,
        )


class ListParsingMixin:
    """List parsing methods.

    Required Host Attributes:
        - _current: Token | None
        - _config: ParseConfig

    Required Host Methods:
        - _advance() -> Token | None
        - _at(token_type) -> bool
        - _take_run(token_type) -> list[Token]
        - _parse_inline(text) -> tuple[Inline, ...]

    """

    _current: Token | None
    _config: ParseConfig

    def _parse_list(self) -> List:
        """Parse a run of list items into a (possibly nested) list.

        Consumes at least the first item. Stops at the first token that is
        not a list item or that cannot be placed in the current tree.
        """
        first = self._current
        root = _ListBuilder(indent=first.indent, ordered=first.ordered)
        stack: list[_ListBuilder] = [root]
        max_depth = max(1, self._config.max_list_depth)

        while self._at(TokenType.LIST_ITEM):
            token = self._current
            indent = token.indent

            if indent < root.indent:
                break

            while len(stack) > 1 and indent < stack[-1].indent:
                stack.pop()

            top = stack[-1]
            if indent > top.indent:
                if not top.items:
                    break
                if len(stack) < max_depth:
                    nested = _ListBuilder(indent=indent, ordered=token.ordered)
                    top.items[-1].sublists.append(nested)
                    stack.append(nested)
                    top = nested
            elif token.ordered != top.ordered:
                break

            top.items.append(_ItemBuilder(children=self._parse_inline(token.content)))
            self._advance()

        return root.freeze()

    def _parse_checklist(self) -> Checklist:
        """Parse a run of checklist items. Indentation is ignored."""
        return Checklist(
            items=tuple(
                ChecklistItem(checked=token.checked, children=self._parse_inline(token.content))
                for token in self._take_run(TokenType.CHECKLIST_ITEM)
            )
        )
