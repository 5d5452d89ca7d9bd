"""
Tabular Export - Escaping Rules

Per-format text escaping. Every function treats None as an empty string.
"""

import math
import numbers
from typing import Any


def cell_text(value: Any) -> str:
    """Render a cell value as text (None -> "")."""
    if value is None:
        return ""
    return str(value)


def is_numeric(value: Any) -> bool:
    """True for finite real numbers; booleans, NaN and infinities are not numbers."""
    if not isinstance(value, numbers.Number) or isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        # complex, signalling NaN
        return False


def quote_csv_field(text: str | None) -> str:
    """Wrap in double quotes, doubling embedded quotes."""
    if text is None:
        text = ""
    return '"' + text.replace('"', '""') + '"'


def escape_xml(text: str | None) -> str:
    """Escape the five XML entities. '&' must go first."""
    if text is None:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def escape_html(text: str | None) -> str:
    """Escape &, <, > and double quotes. Apostrophes are left as is."""
    if text is None:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
