"""Formatting of DOT attribute lists."""
from __future__ import annotations

import re
from typing import Mapping, Optional

AttributeSet = Mapping[str, object]

STATEMENT_KINDS = ("graph", "node", "edge")

# backslashes that would otherwise escape a quote, including the closing one
_BACKSLASHES_BEFORE_QUOTE = re.compile(r'(\\+)(?="|\Z)')


def format_value(value: object) -> str:
    """Render ``value`` as the text placed between double quotes.

    Backslash runs in front of a quote or at the end of the value are doubled
    and quotes are escaped.  Other backslashes pass through so DOT escapes
    such as ``\\n`` and ``\\l`` keep working.
    """

    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    text = _BACKSLASHES_BEFORE_QUOTE.sub(lambda match: match.group(1) * 2, text)
    return text.replace('"', '\\"')


def _is_omitted(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def format_attribute_list(attrs: Optional[AttributeSet]) -> str:
    """Return ``name = "value"`` entries joined by ``"; "``.

    Entries whose value is ``None`` or the empty string are skipped.  The
    result is empty when no entry survives.
    """

    if not attrs:
        return ""
    return "; ".join(
        f'{name} = "{format_value(value)}"'
        for name, value in attrs.items()
        if not _is_omitted(value)
    )


def format_attributes(attrs: Optional[AttributeSet]) -> str:
    """Return the bracketed attribute list, or ``""`` when it would be empty."""

    body = format_attribute_list(attrs)
    return f"[{body}]" if body else ""


def format_typed(kind: str, attrs: Optional[AttributeSet]) -> str:
    """Render a default-attribute statement such as ``node [shape = "box"]``."""

    if kind not in STATEMENT_KINDS:
        raise ValueError(f"Unsupported statement kind: {kind}")
    block = format_attributes(attrs)
    return f"{kind} {block}" if block else ""


__all__ = [
    "AttributeSet",
    "STATEMENT_KINDS",
    "format_attribute_list",
    "format_attributes",
    "format_typed",
    "format_value",
]
