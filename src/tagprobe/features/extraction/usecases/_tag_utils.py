"""Tag utility helpers.

Where: src/tagprobe/features/extraction/usecases/_tag_utils.py
What: Provide pure helpers for normalizing tag strings and stream numbers.
Why: Keep the field extractor focused on selection rules.
"""

from __future__ import annotations

from datetime import timedelta

__all__ = [
    "duration_to_ms",
    "first_non_empty",
    "parse_year",
]

_ONE_MS = timedelta(milliseconds=1)


def first_non_empty(*values: int | None) -> int | None:
    """Return the first value that is neither None nor zero."""
    for value in values:
        if value:
            return value
    return None


def parse_year(date_str: str | None) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    if not date_str:
        return None
    date_str = date_str.strip()
    return int(date_str[:4]) if len(date_str) >= 4 and date_str[:4].isdigit() else None


def duration_to_ms(duration: timedelta) -> int:
    """Convert a duration to whole milliseconds, truncating."""
    return max(duration // _ONE_MS, 0)
