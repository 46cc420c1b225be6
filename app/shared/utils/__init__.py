"""Shared utilities: datetime helpers."""

from app.shared.utils.datetime import (
    ensure_utc,
    start_of_day_utc,
    to_naive_utc,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "start_of_day_utc",
    "to_naive_utc",
    "utc_now",
]
