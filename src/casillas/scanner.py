"""List-region scanning over a flat markdown-it token stream.

The token stream encodes the document tree as open/close pairs. The scanner
pairs every list item with its close, then walks the stream front to back
and reports every list item that can hold a task marker, together with the
list container that owns it and the bound of the item.

Two tracking modes exist:

- Nesting-aware (default): open containers are kept on a stack, so the
  owner of an item is always the top of the stack. Leaving a nested list
  returns to the enclosing one.
- Flag mode (``track_nesting=False``): a single inside-list flag, set on a
  list opening and cleared on any list closing. Items that follow a
  nested list inside the same outer list are not reported in this mode,
  and the owner is left for the propagator to find by scanning backward.

Thread Safety:
    Stateless. Each call keeps its own stack.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from markdown_it.token import Token

from casillas.config import TaskListConfig
from casillas.tokens import (
    is_item_close,
    is_item_open,
    is_list_close,
    is_list_open,
)


@dataclass(frozen=True, slots=True)
class ListRegion:
    """One list item eligible for task marker matching.

    Attributes:
        item: Index of the ``list_item_open`` token
        container: Index of the owning list opening token, or None when the
            scanner did not record it (flag mode resolves it later by
            scanning backward)
        end: Index of the matching ``list_item_close`` token, or the stream
            length for an unterminated item. None means "no bound".

    """

    item: int
    container: int | None
    end: int | None = None


def scan_list_items(tokens: Sequence[Token], config: TaskListConfig) -> Iterator[ListRegion]:
    """Yield list items inside tracked list containers, in document order.

    Args:
        tokens: Block-level token stream of one document
        config: Active configuration (``ordered_lists``, ``track_nesting``)

    Yields:
        ListRegion for every candidate list item

    """
    if config.track_nesting:
        yield from _scan_nested(tokens, config.ordered_lists)
    else:
        yield from _scan_flag(tokens, config.ordered_lists)


def _item_ends(tokens: Sequence[Token]) -> dict[int, int]:
    """Map each ``list_item_open`` index to the index of its close."""
    ends: dict[int, int] = {}
    open_items: list[int] = []
    for i, token in enumerate(tokens):
        if is_item_open(token):
            open_items.append(i)
        elif is_item_close(token) and open_items:
            ends[open_items.pop()] = i
    for i in open_items:
        ends[i] = len(tokens)
    return ends


def _scan_nested(tokens: Sequence[Token], ordered: bool) -> Iterator[ListRegion]:
    ends = _item_ends(tokens)
    # Every list container goes on the stack, tracked or not, so that an
    # item is only reported when its direct owner is a tracked list.
    stack: list[int] = []
    for i, token in enumerate(tokens):
        if is_list_open(token, ordered=True):
            stack.append(i)
            continue
        if is_list_close(token, ordered=True):
            if stack:
                stack.pop()
            continue
        if not stack or not is_item_open(token):
            continue
        owner = stack[-1]
        if is_list_open(tokens[owner], ordered):
            yield ListRegion(item=i, container=owner, end=ends[i])


def _scan_flag(tokens: Sequence[Token], ordered: bool) -> Iterator[ListRegion]:
    ends = _item_ends(tokens)
    inside_list = False
    for i, token in enumerate(tokens):
        if is_list_open(token, ordered):
            inside_list = True
            continue
        if is_list_close(token, ordered):
            inside_list = False
            continue
        if not inside_list or not is_item_open(token):
            continue
        yield ListRegion(item=i, container=None, end=ends[i])


__all__ = [
    "ListRegion",
    "scan_list_items",
]
