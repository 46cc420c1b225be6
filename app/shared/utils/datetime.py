"""
UTC datetime utilities for consistent timezone handling.

All datetime values compared by search (created_at bounds, sort keys)
must be timezone-aware UTC. Normalize at store and API boundaries.
"""

from datetime import UTC, date, datetime, time


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def start_of_day_utc(day: date) -> datetime:
    """Return midnight UTC of the given calendar day."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def to_naive_utc(dt: datetime | None) -> datetime | None:
    """Convert to UTC and drop tzinfo (for timestamp-without-time-zone columns)."""
    if dt is None:
        return None
    return ensure_utc(dt).replace(tzinfo=None)
