"""Shared fixtures for Casillas tests."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token

from casillas import create_markdown


@pytest.fixture
def md() -> MarkdownIt:
    """Engine with the task list plugin and default options."""
    return create_markdown()


@pytest.fixture
def plain_md() -> MarkdownIt:
    """Engine without the plugin, for inspecting untouched token streams."""
    return MarkdownIt("commonmark")


def inline_task(text: str, level: int = 0, with_children: bool = True) -> list[Token]:
    """Hand-built token stream for one bulleted list item holding ``text``."""
    inline = Token("inline", "", 0, level=level + 3, content=text)
    if with_children:
        inline.children = [Token("text", "", 0, content=text)]
    return [
        Token("bullet_list_open", "ul", 1, level=level, block=True),
        Token("list_item_open", "li", 1, level=level + 1, block=True),
        Token("paragraph_open", "p", 1, level=level + 2, block=True, hidden=True),
        inline,
        Token("paragraph_close", "p", -1, level=level + 2, block=True, hidden=True),
        Token("list_item_close", "li", -1, level=level + 1, block=True),
        Token("bullet_list_close", "ul", -1, level=level, block=True),
    ]


@pytest.fixture
def task_tokens():
    """Factory fixture building hand-made token streams (see inline_task)."""
    return inline_task
