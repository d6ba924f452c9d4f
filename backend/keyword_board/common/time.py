"""
Time Utilities

Keyword `createdAt` values are stored as naive UTC and returned UTC-aware.
A client timestamp without an offset is read as UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is UTC-aware.

    - If `dt` is naive, treat it as UTC.
    - If `dt` is timezone-aware, convert it to UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to naive UTC for database storage.

    Returns `None` if input is `None`.
    """
    aware = ensure_utc(dt)
    if aware is None:
        return None
    return aware.replace(tzinfo=None)
