"""Ordering and filtering of entries for display."""

from collections.abc import Iterable
from typing import Optional, Union

from streaklog.models import DayType, JournalEntry

SEARCH_FIELDS = ("headline", "facts", "analysis", "action")

ALL_TYPES = "all"


def sort_entries_desc(entries: Iterable[JournalEntry]) -> list[JournalEntry]:
    """Newest day first. Entries on the same day keep their order."""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def matches_query(entry: JournalEntry, query: str) -> bool:
    """Case-insensitive substring match against the entry's text fields."""
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in getattr(entry, field).lower() for field in SEARCH_FIELDS)


def filter_entries(
    entries: Iterable[JournalEntry],
    query: str = "",
    day_type: Optional[Union[DayType, str]] = None,
) -> list[JournalEntry]:
    """Newest-first entries matching ``query`` and ``day_type``.

    ``day_type`` of None or "all" keeps every type.

    Raises:
        ValueError: If ``day_type`` is not a known day type.
    """
    wanted = None
    if day_type is not None and day_type != ALL_TYPES:
        wanted = DayType(day_type)

    return [
        entry
        for entry in sort_entries_desc(entries)
        if matches_query(entry, query) and (wanted is None or entry.day_type is wanted)
    ]
