"""Tests for feed ordering and filtering.

**Feature: streak-journal**
"""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from streaklog.core.feed import filter_entries, sort_entries_desc
from streaklog.models import DayType, JournalEntry


@pytest.fixture
def entries() -> list[JournalEntry]:
    return [
        JournalEntry(date=date(2024, 1, 1), headline="Gym in the morning", day_type=DayType.CLEAN),
        JournalEntry(date=date(2024, 1, 3), facts="Late night scrolling", day_type=DayType.URGE),
        JournalEntry(date=date(2024, 1, 2), analysis="Too tired", day_type=DayType.SLIP),
        JournalEntry(date=date(2024, 1, 4), action="Back to the GYM", day_type=DayType.CLEAN),
    ]


class TestFeed:
    """The feed is newest first and filters by text and day type."""

    def test_sorted_newest_first(self, entries):
        assert [e.date.day for e in sort_entries_desc(entries)] == [4, 3, 2, 1]

    def test_search_is_case_insensitive_across_fields(self, entries):
        found = filter_entries(entries, query="  gym ")
        assert [e.date.day for e in found] == [4, 1]

    def test_search_matches_facts_and_analysis(self, entries):
        assert [e.date.day for e in filter_entries(entries, query="scroll")] == [3]
        assert [e.date.day for e in filter_entries(entries, query="TIRED")] == [2]

    def test_type_filter(self, entries):
        assert [e.date.day for e in filter_entries(entries, day_type="clean")] == [4, 1]
        assert [e.date.day for e in filter_entries(entries, day_type=DayType.SLIP)] == [2]

    def test_all_keeps_everything(self, entries):
        assert len(filter_entries(entries, day_type="all")) == 4

    def test_query_and_type_combine(self, entries):
        assert filter_entries(entries, query="gym", day_type="urge") == []

    def test_unknown_type(self, entries):
        with pytest.raises(ValueError):
            filter_entries(entries, day_type="relapse")

    @given(
        days=st.lists(
            st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 1, 1)),
            max_size=30,
        )
    )
    @settings(max_examples=50)
    def test_sort_is_descending(self, days: list[date]):
        """*For any* entries, sorted dates are non-increasing."""
        ordered = sort_entries_desc(JournalEntry(date=d) for d in days)
        assert all(a.date >= b.date for a, b in zip(ordered, ordered[1:]))
