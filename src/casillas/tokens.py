"""Token type names and capability-checked access for markdown-it tokens.

markdown-it-py produces one flat, order-significant list of Token objects
per document. Every token carries ``content``, ``children`` and ``attrs``,
but only some kinds give them meaning: ``children`` is populated only on
``inline`` tokens, attributes are rendered only on opening block tags.
The helpers below check the token's role before touching role-specific
fields, so the pass never relies on a field that happens to be empty.

Thread Safety:
    Stateless functions. Tokens are mutated in place, so a single token
    list must not be shared between concurrent passes.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markdown_it.token import Token

if TYPE_CHECKING:
    from collections.abc import Sequence

# Block structure
BULLET_LIST_OPEN = "bullet_list_open"
BULLET_LIST_CLOSE = "bullet_list_close"
ORDERED_LIST_OPEN = "ordered_list_open"
ORDERED_LIST_CLOSE = "ordered_list_close"
LIST_ITEM_OPEN = "list_item_open"
LIST_ITEM_CLOSE = "list_item_close"
PARAGRAPH_OPEN = "paragraph_open"
PARAGRAPH_CLOSE = "paragraph_close"

# Inline content
INLINE = "inline"
TEXT = "text"
HTML_INLINE = "html_inline"


def is_list_open(token: Token, ordered: bool = False) -> bool:
    """Check for a list container opening (bulleted, optionally ordered)."""
    if token.type == BULLET_LIST_OPEN:
        return True
    return ordered and token.type == ORDERED_LIST_OPEN


def is_list_close(token: Token, ordered: bool = False) -> bool:
    """Check for a list container closing (bulleted, optionally ordered)."""
    if token.type == BULLET_LIST_CLOSE:
        return True
    return ordered and token.type == ORDERED_LIST_CLOSE


def is_item_open(token: Token) -> bool:
    return token.type == LIST_ITEM_OPEN


def is_item_close(token: Token) -> bool:
    return token.type == LIST_ITEM_CLOSE


def is_paragraph_open(token: Token) -> bool:
    return token.type == PARAGRAPH_OPEN


def is_paragraph_close(token: Token) -> bool:
    return token.type == PARAGRAPH_CLOSE


def is_inline(token: Token) -> bool:
    return token.type == INLINE


def inline_children(token: Token) -> list[Token] | None:
    """Return the child list of an inline token that has children.

    Args:
        token: Any token from the block-level stream

    Returns:
        The token's own (mutable) children list, or None when the token is
        not an inline token or carries no children.

    """
    if token.type != INLINE:
        return None
    children = token.children
    if not children:
        return None
    return children


def leading_text(token: Token) -> Token | None:
    """Return the first child of an inline token if it is a text token."""
    children = inline_children(token)
    if children is None:
        return None
    first = children[0]
    if first.type != TEXT:
        return None
    return first


def join_class(token: Token, names: str) -> None:
    """Add whitespace-separated class names to a token, each at most once.

    Many list items share one container, so the container's classes are
    joined once per matched item and must each stay a single entry.
    """
    current = str(token.attrGet("class") or "").split()
    added = [name for name in dict.fromkeys(names.split()) if name not in current]
    if not added:
        return
    token.attrSet("class", " ".join(current + added))


def set_data(token: Token, name: str, value: str) -> None:
    """Set a ``data-*`` attribute on a token."""
    token.attrSet(f"data-{name}", value)


def make_html_inline(content: str) -> Token:
    """Create a raw HTML leaf token for insertion into inline children."""
    token = Token(HTML_INLINE, "", 0)
    token.content = content
    return token


def find_ancestor(
    tokens: Sequence[Token],
    start: int,
    types: frozenset[str],
) -> int | None:
    """Scan backward from ``start`` for the nearest token of the given types.

    Runs in O(distance) and returns None when the start of the sequence is
    reached without a hit.
    """
    for index in range(min(start, len(tokens) - 1), -1, -1):
        if tokens[index].type in types:
            return index
    return None


__all__ = [
    "BULLET_LIST_CLOSE",
    "BULLET_LIST_OPEN",
    "HTML_INLINE",
    "INLINE",
    "LIST_ITEM_CLOSE",
    "LIST_ITEM_OPEN",
    "ORDERED_LIST_CLOSE",
    "ORDERED_LIST_OPEN",
    "PARAGRAPH_CLOSE",
    "PARAGRAPH_OPEN",
    "TEXT",
    "find_ancestor",
    "inline_children",
    "is_inline",
    "is_item_close",
    "is_item_open",
    "is_list_close",
    "is_list_open",
    "is_paragraph_close",
    "is_paragraph_open",
    "join_class",
    "leading_text",
    "make_html_inline",
    "set_data",
]
