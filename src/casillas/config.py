"""Immutable task list configuration for Casillas.

Each plugin registration owns exactly one TaskListConfig. The config is
built once when the plugin is applied to a MarkdownIt instance and is
captured by the core rule registered for that instance, so two engines
configured differently never observe each other's options.

Usage:
    from casillas.config import TaskListConfig

    config = TaskListConfig(enabled=True, label_after=True)

    # Option names used by JavaScript task list plugins are accepted too
    config = TaskListConfig.from_dict({"labelAfter": True, "listClass": "todo"})

Thread Safety:
    TaskListConfig is a frozen dataclass. Safe to share across threads.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from casillas.errors import ConfigError

# camelCase option names -> field names
OPTION_ALIASES: dict[str, str] = {
    "labelAfter": "label_after",
    "listClass": "list_class",
    "itemClass": "item_class",
    "checkboxClass": "checkbox_class",
    "labelClass": "label_class",
    "tiptapCompatible": "tiptap_compatible",
    "orderedLists": "ordered_lists",
    "trackNesting": "track_nesting",
    "idPrefix": "id_prefix",
}

_BOOL_FIELDS = (
    "enabled",
    "label",
    "label_after",
    "tiptap_compatible",
    "ordered_lists",
    "track_nesting",
)

_CLASS_FIELDS = ("list_class", "item_class", "checkbox_class", "label_class")


@dataclass(frozen=True, slots=True)
class TaskListConfig:
    """Immutable task list configuration.

    Attributes:
        enabled: Render interactive checkboxes (no ``disabled`` attribute)
        label: Associate each checkbox with a ``<label>`` element
        label_after: Put the label (wrapping the item text) after the checkbox
            instead of wrapping the checkbox itself
        list_class: Class(es) added to the list container (``<ul>``)
        item_class: Class(es) added to each task list item (``<li>``)
        checkbox_class: Class(es) on the ``<input>`` element
        label_class: Class(es) on the ``<label>`` element
        tiptap_compatible: Emit ``data-type``/``data-checked`` attributes
            instead of checkbox inputs
        ordered_lists: Also recognize task items inside ordered lists
        track_nesting: Track list depth with a stack. When False, a single
            inside-list flag is used and the first close of any bulleted
            list ends the region, even for an enclosing list.
        id_prefix: Prefix for generated checkbox ids

    Class options hold one or more whitespace-separated class names.

    """

    enabled: bool = False
    label: bool = True
    label_after: bool = False
    list_class: str = "contains-task-list"
    item_class: str = "task-list-item"
    checkbox_class: str = "task-list-item-checkbox"
    label_class: str = "task-list-item-label"
    tiptap_compatible: bool = False
    ordered_lists: bool = False
    track_nesting: bool = True
    id_prefix: str = "task-item-"

    def __post_init__(self) -> None:
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(name, f"expected bool, got {type(value).__name__}")

        for name in _CLASS_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(name, f"expected str, got {type(value).__name__}")
            if not value.split():
                raise ConfigError(name, f"must contain at least one class name, got {value!r}")

        if not isinstance(self.id_prefix, str) or not self.id_prefix:
            raise ConfigError("id_prefix", "must be a non-empty string")

    @classmethod
    def from_dict(
        cls,
        options: dict[str, Any] | None,
        *,
        strict: bool = False,
    ) -> TaskListConfig:
        """Create TaskListConfig from a dictionary of options.

        Accepts both field names (``label_after``) and the camelCase names
        used by markdown-it task list plugins (``labelAfter``). A ``None`` value
        means "use the default". Unknown keys are ignored, which suits option
        dicts shared with other plugins, unless ``strict`` is set.

        Args:
            options: Option mapping, or None for all defaults.
            strict: Raise ConfigError on unknown keys.

        Returns:
            New TaskListConfig instance.

        Raises:
            ConfigError: If a recognized option has an invalid value, or a key
                is unknown in strict mode.

        Example:
            >>> config = TaskListConfig.from_dict({"enabled": True, "listClass": "todo"})
            >>> config.list_class
            'todo'

        """
        if not options:
            return DEFAULT_CONFIG

        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                if strict:
                    raise ConfigError(key, "unknown task list option")
                continue
            if value is not None:
                filtered[name] = value
        if not filtered:
            return DEFAULT_CONFIG
        return cls(**filtered)

    def merge(self, **overrides: Any) -> TaskListConfig:
        """Return a copy with the given fields replaced.

        camelCase names are accepted like in from_dict(); None values are
        ignored. Unknown names always raise, as in ``from_dict(strict=True)``.
        """
        changes = {
            OPTION_ALIASES.get(key, key): value
            for key, value in overrides.items()
            if value is not None
        }
        if not changes:
            return self
        valid_fields = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - valid_fields)
        if unknown:
            raise ConfigError(unknown[0], "unknown task list option")
        return dataclasses.replace(self, **changes)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: TaskListConfig = TaskListConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "OPTION_ALIASES",
    "TaskListConfig",
]
