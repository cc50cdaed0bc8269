"""
Core Utilities.

Shared utility functions used across the backend.
"""

from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive and
    assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: datetime) -> datetime:
    """
    Return the current time, but never earlier than one tick after `previous`.

    Keeps updated_at strictly increasing when two writes land within the
    clock's resolution.
    """
    now = utc_now()
    if now <= previous:
        return previous + _TICK
    return now
