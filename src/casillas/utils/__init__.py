"""Helpers shared by the task list pass: logger lookup and attribute escaping."""

from casillas.utils.logger import get_logger
from casillas.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
