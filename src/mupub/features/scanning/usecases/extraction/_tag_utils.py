"""Tag utility helpers.

Where: src/mupub/features/scanning/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing and safe tag value access.
Why: Keep format extractors small and share number/date parsing between them.
"""

from __future__ import annotations

__all__ = [
    "safe_get_first",
    "parse_track_number",
    "parse_year",
]


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_track_number(value: str) -> int | None:
    """Parse the number part of a 'number/total' track tag."""
    head = value.split(sep="/")[0].strip() if value else ""
    return int(head) if head.isdigit() else None


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    return int(date_str[:4]) if date_str and len(date_str) >= 4 and date_str[:4].isdigit() else None
