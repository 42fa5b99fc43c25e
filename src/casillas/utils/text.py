"""Escaping for values written into checkbox and label attributes."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape a class name, id or prefix for a double- or single-quoted attribute.

    Option values come from user configuration and end up inside the raw
    ``html_inline`` fragments the pass inserts, which markdown-it-py does
    not escape again. Quotes become ``&quot;`` and ``&#x27;``.

    Example:
        >>> escape_html('todo" onclick="x')
        'todo&quot; onclick=&quot;x'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")
