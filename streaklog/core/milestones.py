"""Milestone progress for the current streak."""

from collections.abc import Sequence
from typing import Optional

from streaklog.models import Milestone, MilestoneStatus

MILESTONES: tuple[Milestone, ...] = (
    Milestone(days=3, label="3 days — momentum"),
    Milestone(days=7, label="7 days — first week"),
    Milestone(days=14, label="14 days — two weeks"),
    Milestone(days=30, label="30 days — one month"),
    Milestone(days=60, label="60 days — strong base"),
    Milestone(days=90, label="90 days — major milestone"),
)


def evaluate_milestones(
    current_streak: int, milestones: Sequence[Milestone] = MILESTONES
) -> list[MilestoneStatus]:
    """Unlock status and days remaining for each milestone.

    Output order follows ``milestones``, not completion order.
    """
    return [
        MilestoneStatus(
            label=milestone.label,
            days=milestone.days,
            unlocked=current_streak >= milestone.days,
            remaining=max(0, milestone.days - current_streak),
        )
        for milestone in milestones
    ]


def next_milestone(statuses: Sequence[MilestoneStatus]) -> Optional[MilestoneStatus]:
    """First milestone still locked, or None when all are unlocked."""
    for status in statuses:
        if not status.unlocked:
            return status
    return None
