"""Dashboard summary of a journal snapshot."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from typing import Union

from streaklog.core.milestones import MILESTONES, evaluate_milestones
from streaklog.core.stage import stage_for
from streaklog.core.streak import EntryLike, compute_streak
from streaklog.models import JournalSummary, Milestone


def summarize(
    entries: Iterable[EntryLike],
    today: Union[date, datetime],
    milestones: Sequence[Milestone] = MILESTONES,
) -> JournalSummary:
    """Streak, stage, milestone progress and entry count in one pass.

    ``total_entries`` counts every record given, including several
    records for the same day.
    """
    snapshot = list(entries)
    streak = compute_streak(snapshot, today)
    return JournalSummary(
        streak=streak,
        stage=stage_for(streak.current),
        milestones=evaluate_milestones(streak.current, milestones),
        total_entries=len(snapshot),
    )
