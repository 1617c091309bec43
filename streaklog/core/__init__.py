"""Pure journal logic - streaks, stages, milestones and feed filtering.

Nothing in this package performs I/O or reads the clock.
"""

from streaklog.core.dates import (
    calendar_day_key,
    day_diff,
    iter_days_back,
    parse_day_key,
    previous_day,
    to_calendar_day,
)
from streaklog.core.feed import filter_entries, sort_entries_desc
from streaklog.core.milestones import MILESTONES, evaluate_milestones, next_milestone
from streaklog.core.stage import stage_for
from streaklog.core.streak import best_streak, compute_streak, current_streak, index_by_day
from streaklog.core.summary import summarize

__all__ = [
    # Dates
    "calendar_day_key",
    "day_diff",
    "iter_days_back",
    "parse_day_key",
    "previous_day",
    "to_calendar_day",
    # Streaks
    "best_streak",
    "compute_streak",
    "current_streak",
    "index_by_day",
    # Stage and milestones
    "MILESTONES",
    "evaluate_milestones",
    "next_milestone",
    "stage_for",
    "summarize",
    # Feed
    "filter_entries",
    "sort_entries_desc",
]
