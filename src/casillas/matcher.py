"""Task marker detection for list items.

A list item is a task when the text of its first paragraph starts with one
of three exact prefixes:

    "[ ] "  unchecked
    "[x] "  checked
    "[X] "  checked

Leading whitespace is already stripped by the block parser. A bracket
without the trailing space, or any other letter between the brackets,
never matches and is left as literal text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from markdown_it.token import Token

from casillas.scanner import ListRegion
from casillas.tokens import (
    is_inline,
    is_item_close,
    is_list_open,
    is_paragraph_close,
    is_paragraph_open,
    leading_text,
)

MARKERS: dict[str, bool] = {
    "[ ] ": False,
    "[x] ": True,
    "[X] ": True,
}

MARKER_LENGTH = 4


@dataclass(frozen=True, slots=True)
class TaskMatch:
    """A list item whose first paragraph starts with a task marker.

    Attributes:
        index: Index of the matched ``inline`` token
        checked: True for ``[x]``/``[X]``, False for ``[ ]``

    """

    index: int
    checked: bool


def starts_with_marker(text: str) -> bool | None:
    """Return the checked state if ``text`` starts with a marker, else None.

    Example:
        >>> starts_with_marker("[x] done")
        True
        >>> starts_with_marker("[ ] todo")
        False
        >>> starts_with_marker("[y] nope") is None
        True

    """
    return MARKERS.get(text[:MARKER_LENGTH])


def match_item(tokens: Sequence[Token], region: ListRegion) -> TaskMatch | None:
    """Find a task marker in the first paragraph of a list item.

    Only a paragraph that is a direct child of the item is considered, and
    only the first one. Paragraphs of nested lists or block quotes belong
    to their own structure, and an item that opens with a nested list is
    not a task even if a later paragraph starts with a marker. The
    paragraph must contain an inline token whose first child is a text
    token carrying the marker. The search never passes ``region.end``.

    Args:
        tokens: Block-level token stream
        region: The list item to inspect

    Returns:
        TaskMatch, or None when the item is not a task

    """
    item = tokens[region.item]
    child_level = item.level + 1
    end = len(tokens) if region.end is None else min(region.end, len(tokens))

    for j in range(region.item + 1, end):
        token = tokens[j]
        if is_item_close(token) and token.level == item.level:
            return None
        if token.level != child_level:
            continue
        if is_list_open(token, ordered=True):
            return None
        if is_paragraph_open(token):
            return _match_paragraph(tokens, j + 1)
    return None


def _match_paragraph(tokens: Sequence[Token], start: int) -> TaskMatch | None:
    for k in range(start, len(tokens)):
        token = tokens[k]
        if is_paragraph_close(token):
            return None
        if not is_inline(token):
            continue

        checked = starts_with_marker(token.content)
        if checked is None:
            return None
        first = leading_text(token)
        if first is None or starts_with_marker(first.content) is None:
            return None
        return TaskMatch(index=k, checked=checked)
    return None


__all__ = [
    "MARKERS",
    "MARKER_LENGTH",
    "TaskMatch",
    "match_item",
    "starts_with_marker",
]
