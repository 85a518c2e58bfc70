"""Pure string escaping helpers used by the built-in converters."""

from __future__ import annotations

# Order matters: "&" must be replaced before any entity is introduced.
_HTML_BASE = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)
_HTML_QUOTES = (
    ('"', "&quot;"),
    ("'", "&#x27;"),
)


def escape_html(text: str, quote: bool = True) -> str:
    """Escape ``& < >`` (and ``" '`` when *quote* is true) as HTML entities."""
    for char, entity in _HTML_BASE:
        text = text.replace(char, entity)
    if quote:
        for char, entity in _HTML_QUOTES:
            text = text.replace(char, entity)
    return text
