"""Calendar-day helpers.

All streak arithmetic happens on local calendar days. Moments are
truncated to local midnight and compared by whole-day difference, so
daylight-saving transitions never make two adjacent days look 23 or 25
hours apart.
"""

import re
from collections.abc import Iterator
from datetime import date, datetime, time, timedelta
from typing import Union

DayLike = Union[date, datetime, str]

ONE_DAY = timedelta(days=1)

_DAY_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_calendar_day(moment: Union[date, datetime]) -> date:
    """Truncate a moment to its local calendar day.

    Aware datetimes are converted to local time first; naive datetimes
    are taken to already be local.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        return moment.date()
    return moment


def calendar_day_key(moment: Union[date, datetime]) -> str:
    """Format a moment as its YYYY-MM-DD day key."""
    return to_calendar_day(moment).isoformat()


def parse_day_key(key: str) -> date:
    """Parse a strict YYYY-MM-DD day key.

    Raises:
        ValueError: If the key is not a valid calendar day.
    """
    if not _DAY_KEY_RE.match(key):
        raise ValueError(f"not a YYYY-MM-DD day key: {key!r}")
    return date.fromisoformat(key)


def _as_day(value: DayLike) -> date:
    if isinstance(value, str):
        return parse_day_key(value)
    return to_calendar_day(value)


def _local_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min).astimezone()


def day_diff(a: DayLike, b: DayLike) -> int:
    """Whole calendar days from ``a`` to ``b`` (positive when ``b`` is later).

    The difference is taken between local-midnight instants and rounded,
    so a 23h or 25h day still counts as one.
    """
    delta = _local_midnight(_as_day(b)) - _local_midnight(_as_day(a))
    return round(delta / ONE_DAY)


def previous_day(day: DayLike) -> date:
    """The calendar day immediately before ``day``."""
    return _as_day(day) - ONE_DAY


def iter_days_back(start: DayLike, limit: int) -> Iterator[date]:
    """Yield ``start`` and the days before it, at most ``limit`` days."""
    day = _as_day(start)
    for _ in range(max(limit, 0)):
        yield day
        day = day - ONE_DAY
