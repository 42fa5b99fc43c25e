"""Mark the list item and list container that own a matched task.

Standard mode joins ``item_class`` onto the ``list_item_open`` token and
``list_class`` onto the list opening token. Tiptap-compatible mode writes
the attributes the Tiptap TaskList/TaskItem extensions parse instead:

    <ul data-type="taskList">
      <li data-type="taskItem" data-checked="true">...</li>

Both operations are idempotent per token, since every task item of a list
marks the same container.
"""

from __future__ import annotations

from collections.abc import Sequence

from markdown_it.token import Token

from casillas.config import TaskListConfig
from casillas.matcher import TaskMatch
from casillas.scanner import ListRegion
from casillas.tokens import (
    BULLET_LIST_OPEN,
    LIST_ITEM_OPEN,
    ORDERED_LIST_OPEN,
    find_ancestor,
    join_class,
    set_data,
)

TIPTAP_LIST_TYPE = "taskList"
TIPTAP_ITEM_TYPE = "taskItem"


def resolve_ancestors(
    tokens: Sequence[Token],
    region: ListRegion | None,
    match: TaskMatch,
    config: TaskListConfig,
) -> tuple[int | None, int | None]:
    """Locate the owning item and container of a match.

    Indices recorded by the scanner are used as they are. Whatever the
    region leaves open is found by scanning backward: the item from the
    matched token (no region), the container from the item (flag-mode
    regions carry no container). The backward scan is O(depth) per match.
    Either index is None when no such ancestor exists before the start of
    the stream.
    """
    if region is not None:
        item: int | None = region.item
        if region.container is not None:
            return item, region.container
    else:
        item = find_ancestor(tokens, match.index, frozenset({LIST_ITEM_OPEN}))
        if item is None:
            return None, None
    container_types = {BULLET_LIST_OPEN}
    if config.ordered_lists:
        container_types.add(ORDERED_LIST_OPEN)
    return item, find_ancestor(tokens, item, frozenset(container_types))


def propagate(
    tokens: Sequence[Token],
    region: ListRegion | None,
    match: TaskMatch,
    config: TaskListConfig,
) -> None:
    """Apply item and list markers to the ancestors of a matched task.

    Args:
        tokens: Block-level token stream
        region: Scanner region of the item, or None to search backward
        match: The injected match
        config: Active configuration

    """
    item, container = resolve_ancestors(tokens, region, match, config)

    if item is not None:
        item_token = tokens[item]
        if config.tiptap_compatible:
            set_data(item_token, "type", TIPTAP_ITEM_TYPE)
            set_data(item_token, "checked", "true" if match.checked else "false")
        else:
            join_class(item_token, config.item_class)

    if container is not None:
        container_token = tokens[container]
        if config.tiptap_compatible:
            set_data(container_token, "type", TIPTAP_LIST_TYPE)
        else:
            join_class(container_token, config.list_class)


__all__ = [
    "TIPTAP_ITEM_TYPE",
    "TIPTAP_LIST_TYPE",
    "propagate",
    "resolve_ancestors",
]
