"""Data models for streaklog."""

from streaklog.models.entry import DayType, JournalEntry
from streaklog.models.streak import (
    JournalSummary,
    Milestone,
    MilestoneStatus,
    Stage,
    Streak,
)

__all__ = [
    "DayType",
    "JournalEntry",
    "JournalSummary",
    "Milestone",
    "MilestoneStatus",
    "Stage",
    "Streak",
]
