"""Timestamp utilities. All persisted times are UTC."""

from datetime import datetime

import pytz

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive datetimes come back from SQLite; they were stored as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)
