"""Streak computation over journal entries.

The engine works on a day-indexed view of the journal: one entry per
calendar day. From it we derive two independent numbers:

* best streak - the longest run of consecutive qualifying days anywhere
  in history, found with a single ascending scan.
* current streak - the run that ends exactly on ``today``, found by
  walking backward one day at a time until a day is missing or a slip.

A single missing day breaks continuity. There is no grace day.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, Union

from streaklog.core.dates import day_diff, iter_days_back, to_calendar_day
from streaklog.models import JournalEntry, Streak

logger = logging.getLogger(__name__)

EntryLike = Union[JournalEntry, Mapping[str, Any]]


def index_by_day(entries: Iterable[EntryLike]) -> dict[date, JournalEntry]:
    """Build the day -> entry view used by the streak passes.

    When several entries share a day, the one with the latest
    ``updated_at`` wins; on a tie the one that comes later in
    ``entries`` wins.

    Raises:
        InvalidEntry: If a record cannot be validated as a JournalEntry.
    """
    index: dict[date, JournalEntry] = {}
    for record in entries:
        entry = JournalEntry.from_record(record)
        existing = index.get(entry.date)
        if existing is not None and existing.updated_at > entry.updated_at:
            logger.debug(
                "Keeping entry %s over older entry %s for %s",
                existing.id,
                entry.id,
                entry.day_key,
            )
            continue
        index[entry.date] = entry
    return index


def best_streak(index: Mapping[date, JournalEntry]) -> int:
    """Longest run of consecutive qualifying days in the index."""
    best = 0
    run = 0
    previous = None

    for day in sorted(index):
        if not index[day].is_qualifying:
            run = 0
        elif previous is not None and day_diff(previous, day) == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
        # Gaps are measured from the last logged day, slip or not
        previous = day

    return best


def current_streak(index: Mapping[date, JournalEntry], today: date) -> int:
    """Consecutive qualifying days ending on ``today``.

    A run can never be longer than the number of indexed days, which
    bounds the backward walk.
    """
    count = 0
    for day in iter_days_back(today, limit=len(index)):
        entry = index.get(day)
        if entry is None or not entry.is_qualifying:
            break
        count += 1
    return count


def compute_streak(
    entries: Iterable[EntryLike], today: Union[date, datetime]
) -> Streak:
    """Compute the current and best streak for a snapshot of entries.

    Args:
        entries: Journal entries, or raw records to validate.
        today: The caller's "now"; datetimes are truncated to the local day.

    Returns:
        Streak with ``current`` and ``best`` lengths.

    Raises:
        InvalidEntry: If any record is malformed.
    """
    index = index_by_day(entries)
    if not index:
        return Streak(current=0, best=0)

    streak = Streak(
        current=current_streak(index, to_calendar_day(today)),
        best=best_streak(index),
    )
    logger.debug(
        "Computed streak over %d days: current=%d best=%d",
        len(index),
        streak.current,
        streak.best,
    )
    return streak
