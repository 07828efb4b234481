"""
Form text helpers.

The journal UI sends several list fields (technologies, audience interests)
as one comma-separated string and expects the same string back for editing.
Empty strings coming from cleared form inputs are stored as NULL.
"""

from typing import Iterable, Optional, Union


def parse_comma_list(value: Union[str, Iterable[str], None]) -> list[str]:
    """
    Split a comma-separated string into trimmed, non-empty entries.

    A list is accepted as-is apart from trimming, so callers that already
    hold a proper list (and entries containing commas) round-trip losslessly.

    Example:
        parse_comma_list(" React, ,Postgres ,")  # ["React", "Postgres"]
    """
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else list(value)
    return [item.strip() for item in items if item and item.strip()]


def join_comma_list(items: Optional[Iterable[str]]) -> str:
    """Join list entries for display in a single text input."""
    if not items:
        return ""
    return ", ".join(items)


def normalize_optional_text(value: Optional[str]) -> Optional[str]:
    """Trim a free-text field; blank input becomes None."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None
