"""markdown-it-py plugin that renders GitHub-style task lists.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from casillas import tasklists_plugin
    >>>
    >>> md = MarkdownIt("commonmark").use(tasklists_plugin, enabled=True)
    >>> html = md.render("- [ ] Unchecked\\n- [x] Checked\\n")

    # Option dicts with JavaScript-style names work as well
    >>> md = MarkdownIt().use(tasklists_plugin, {"labelAfter": True})

The plugin registers one core rule after ``inline``. Each call of the rule
is one render pass over one document:

1. scan_list_items() finds list items inside tracked lists
2. match_item() tests the first paragraph for a marker
3. inject() strips the marker and inserts checkbox markup
4. propagate() marks the owning item and list

Thread Safety:
    The configuration is frozen and captured by the rule instance of one
    registration. Per-pass state (the id counter) is created inside each
    call, so concurrent renders on different engines, or on the same
    engine, do not share mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from casillas.config import TaskListConfig
from casillas.errors import PluginError
from casillas.markup import IdCounter, inject
from casillas.matcher import match_item
from casillas.propagate import propagate
from casillas.scanner import scan_list_items
from casillas.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.rules_core import StateCore
    from markdown_it.token import Token

logger = get_logger(__name__)

RULE_NAME = "github-task-lists"
ANCHOR_RULE = "inline"


class TaskListRule:
    """Core rule bound to one immutable configuration."""

    __slots__ = ("config",)

    def __init__(self, config: TaskListConfig) -> None:
        self.config = config

    def __call__(self, state: StateCore) -> None:
        self.run(state.tokens)

    def run(self, tokens: list[Token]) -> int:
        """Transform task list items in ``tokens`` in place.

        Args:
            tokens: Block-level token stream after inline parsing

        Returns:
            Number of task items rewritten

        """
        config = self.config
        ids = IdCounter(config.id_prefix)
        matched = 0

        for region in scan_list_items(tokens, config):
            match = match_item(tokens, region)
            if match is None:
                continue
            if not inject(tokens, match, config, ids):
                logger.debug("Skipping task marker without text child at token %d", match.index)
                continue
            propagate(tokens, region, match, config)
            matched += 1

        if matched:
            logger.debug("Rendered %d task list item(s), %d id(s) issued", matched, ids.count)
        return matched


def build_config(
    options: TaskListConfig | dict[str, Any] | None = None,
    **overrides: Any,
) -> TaskListConfig:
    """Merge an options object and keyword overrides into one config."""
    if isinstance(options, TaskListConfig):
        config = options
    else:
        config = TaskListConfig.from_dict(options, strict=True)
    return config.merge(**overrides)


def tasklists_plugin(
    md: MarkdownIt,
    options: TaskListConfig | dict[str, Any] | None = None,
    **overrides: Any,
) -> None:
    """Register the task list pass on a MarkdownIt instance.

    Applying the plugin twice to the same instance replaces the earlier
    registration instead of running the pass twice.

    Unknown option names are rejected with ConfigError, whether they come
    from ``options`` or from keyword overrides, so a misspelled option
    never passes silently. Use ``TaskListConfig.from_dict(options)`` to
    build a config from a dict shared with other plugins, which ignores
    keys it does not know, and pass the result as ``options``.

    Args:
        md: The markdown-it-py engine
        options: Option dict (field or camelCase names) or a TaskListConfig
        **overrides: Individual options, applied on top of ``options``

    Raises:
        ConfigError: If an option is unknown or has an invalid value
        PluginError: If the engine has no ``inline`` core rule

    """
    rule = TaskListRule(build_config(options, **overrides))
    ruler = md.core.ruler
    rules = ruler.get_all_rules()

    if RULE_NAME in rules:
        ruler.at(RULE_NAME, rule)
        return
    if ANCHOR_RULE not in rules:
        raise PluginError(RULE_NAME, f"core rule {ANCHOR_RULE!r} not found")
    ruler.after(ANCHOR_RULE, RULE_NAME, rule)


__all__ = [
    "RULE_NAME",
    "TaskListRule",
    "build_config",
    "tasklists_plugin",
]
