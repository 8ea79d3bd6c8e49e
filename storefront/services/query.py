"""
Query helpers shared by the managers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import ColumnElement


def contains_ignore_case(column, needle: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards taken literally."""
    # Escape SQL LIKE metacharacters to prevent wildcard injection
    safe = needle.replace("\\", "\\\\").replace("%", r"\%").replace("_", r"\_")
    return column.ilike(f"%{safe}%", escape="\\")


def as_utc(when: datetime) -> datetime:
    """Treat naive datetimes as UTC and normalise aware ones to UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)
