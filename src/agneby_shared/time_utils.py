"""
time_utils.py — clock and date-window helpers.

All timestamps written by the back office are timezone-aware UTC.
Naive datetimes coming from forms or old rows are assumed to be UTC.

Usage:
    from agneby_shared.time_utils import utc_now, within_next, within_last

    within_next(event.date, days=30, now=utc_now())
    within_last(job.created_at, days=7, now=utc_now())
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def within_next(value: datetime | None, *, days: int, now: datetime) -> bool:
    """True when ``now <= value <= now + days`` (both bounds inclusive)."""
    if value is None:
        return False
    value = ensure_utc(value)
    now = ensure_utc(now)
    return now <= value <= now + timedelta(days=days)


def within_last(value: datetime | None, *, days: int, now: datetime) -> bool:
    """True when ``value >= now - days``."""
    if value is None:
        return False
    return ensure_utc(value) >= ensure_utc(now) - timedelta(days=days)


class MonotonicClock:
    """
    Wraps a clock so consecutive readings are strictly increasing.

    Two writes in the same microsecond would otherwise get equal
    ``updated_at`` values.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last: datetime | None = None

    def __call__(self) -> datetime:
        now = ensure_utc(self._clock())
        if self._last is not None and now <= self._last:
            now = self._last + timedelta(microseconds=1)
        self._last = now
        return now
