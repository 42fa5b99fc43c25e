"""Logger lookup for the task list pass.

Every casillas module logs below the ``casillas`` namespace, so one
``logging.getLogger("casillas").setLevel(logging.DEBUG)`` shows the pass
summaries and skipped markers without touching markdown-it-py's loggers.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the casillas namespace.

    Module names such as ``casillas.plugin`` are used as they are; any other
    name gets the ``casillas.`` prefix.

    Example:
        >>> get_logger("casillas.plugin").name
        'casillas.plugin'
        >>> get_logger("checklists").name
        'casillas.checklists'
    """
    if not (name == "casillas" or name.startswith("casillas.")):
        name = f"casillas.{name}"
    return logging.getLogger(name)
