"""
Casillas — GitHub-style task lists for markdown-it-py

Turns list items starting with ``[ ]``, ``[x]`` or ``[X]`` into checkbox
markup and marks the enclosing list and item with CSS classes (or with the
``data-*`` attributes Tiptap's task list extensions expect).

Quick Start:
    >>> from casillas import render
    >>> html = render("- [ ] Write docs\\n- [x] Ship it\\n")

    >>> # Or attach the plugin to your own engine
    >>> from markdown_it import MarkdownIt
    >>> from casillas import tasklists_plugin
    >>> md = MarkdownIt("commonmark").use(tasklists_plugin, enabled=True, label_after=True)
    >>> html = md.render("- [x] Done\\n")

Installation:
    pip install casillas             # Plugin + markdown-it-py
    pip install casillas[test]       # + pytest and Hypothesis
"""

from typing import Any

from markdown_it import MarkdownIt

from casillas.config import DEFAULT_CONFIG, TaskListConfig
from casillas.errors import CasillasError, ConfigError, PluginError
from casillas.markup import IdCounter
from casillas.matcher import MARKERS, TaskMatch, match_item, starts_with_marker
from casillas.plugin import RULE_NAME, TaskListRule, tasklists_plugin
from casillas.scanner import ListRegion, scan_list_items

__version__ = "0.1.0"


def create_markdown(
    preset: str = "commonmark",
    options: TaskListConfig | dict[str, Any] | None = None,
    **overrides: Any,
) -> MarkdownIt:
    """Create a MarkdownIt engine with the task list plugin applied.

    Args:
        preset: markdown-it-py preset name ("commonmark", "gfm-like", ...)
        options: Option dict or TaskListConfig
        **overrides: Individual options, applied on top of ``options``

    Returns:
        Configured MarkdownIt instance

    Example:
        >>> md = create_markdown(enabled=True)
        >>> "disabled" in md.render("- [ ] x\\n")
        False

    """
    return MarkdownIt(preset).use(tasklists_plugin, options, **overrides)


def render(
    source: str,
    options: TaskListConfig | dict[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Render Markdown to HTML with task lists in one call.

    Builds a fresh engine per call. Reuse create_markdown() when rendering
    many documents with the same options.
    """
    return create_markdown(options=options, **overrides).render(source)


__all__ = [
    # Version
    "__version__",
    # High-level API
    "create_markdown",
    "render",
    "tasklists_plugin",
    # Configuration
    "DEFAULT_CONFIG",
    "TaskListConfig",
    # Pass components
    "IdCounter",
    "ListRegion",
    "MARKERS",
    "RULE_NAME",
    "TaskListRule",
    "TaskMatch",
    "match_item",
    "scan_list_items",
    "starts_with_marker",
    # Errors
    "CasillasError",
    "ConfigError",
    "PluginError",
]
