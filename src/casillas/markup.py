"""Checkbox markup construction and injection.

Standard output for ``- [x] Ship it`` with default options:

    <li class="task-list-item">
      <label class="task-list-item-label" for="task-item-1"><input
        class="task-list-item-checkbox" type="checkbox" disabled="" checked=""
        id="task-item-1"></label>Ship it</li>

With ``label_after=True`` the checkbox comes first and the label wraps the
item text instead:

    <input ... id="task-item-1"><label ... for="task-item-1">Ship it</label>

In tiptap-compatible mode no markup is injected at all. The marker text is
removed and the list item carries ``data-*`` attributes (see propagate).

Ids are produced by an IdCounter that lives for exactly one render pass,
so ids are unique within a document and restart at 1 for the next one.
"""

from __future__ import annotations

from collections.abc import Sequence

from markdown_it.token import Token

from casillas.config import TaskListConfig
from casillas.matcher import MARKER_LENGTH, TaskMatch
from casillas.tokens import inline_children, leading_text, make_html_inline
from casillas.utils.text import escape_html


class IdCounter:
    """Monotonically increasing checkbox id generator for one render pass."""

    __slots__ = ("_prefix", "_count")

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix
        self._count = 0

    @property
    def count(self) -> int:
        """Number of ids handed out so far."""
        return self._count

    def next(self) -> str:
        self._count += 1
        return f"{self._prefix}{self._count}"


def checkbox_html(checked: bool, config: TaskListConfig, checkbox_id: str | None = None) -> str:
    """Build the ``<input type="checkbox">`` element.

    Args:
        checked: Whether the task is done
        config: Active configuration (classes, enabled)
        checkbox_id: Id to associate a label with, or None

    Returns:
        HTML for the input element

    """
    parts = [f'<input class="{_class_attr(config.checkbox_class)}" type="checkbox"']
    if not config.enabled:
        parts.append(' disabled=""')
    if checked:
        parts.append(' checked=""')
    if checkbox_id is not None:
        parts.append(f' id="{escape_html(checkbox_id)}"')
    parts.append(">")
    return "".join(parts)


def _class_attr(names: str) -> str:
    return escape_html(" ".join(names.split()))


def label_open_html(config: TaskListConfig, checkbox_id: str) -> str:
    """Build the opening ``<label>`` tag pointing at ``checkbox_id``."""
    return f'<label class="{_class_attr(config.label_class)}" for="{escape_html(checkbox_id)}">'


def strip_marker(token: Token) -> bool:
    """Remove the task marker from an inline token and its first text child.

    Returns:
        False (and leaves the token untouched) when the token has no leading
        text child to strip from.

    """
    first = leading_text(token)
    if first is None:
        return False
    token.content = token.content[MARKER_LENGTH:]
    first.content = first.content[MARKER_LENGTH:]
    return True


def inject(
    tokens: Sequence[Token],
    match: TaskMatch,
    config: TaskListConfig,
    ids: IdCounter,
) -> bool:
    """Rewrite a matched inline token into checkbox markup.

    Args:
        tokens: Block-level token stream
        match: The matched marker
        config: Active configuration
        ids: Id generator of the current pass

    Returns:
        True if the token was rewritten, False if it had no children to
        carry the visible text (nothing is changed in that case).

    """
    token = tokens[match.index]
    children = inline_children(token)
    if children is None or not strip_marker(token):
        return False

    if config.tiptap_compatible:
        return True

    if not config.label:
        children.insert(0, make_html_inline(checkbox_html(match.checked, config)))
        return True

    checkbox_id = ids.next()
    checkbox = checkbox_html(match.checked, config, checkbox_id)
    label_open = label_open_html(config, checkbox_id)

    if config.label_after:
        children.insert(0, make_html_inline(checkbox + label_open))
        children.append(make_html_inline("</label>"))
    else:
        children.insert(0, make_html_inline(f"{label_open}{checkbox}</label>"))
    return True


__all__ = [
    "IdCounter",
    "checkbox_html",
    "inject",
    "label_open_html",
    "strip_marker",
]
