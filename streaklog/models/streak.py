"""Derived streak, stage and milestone models."""

from pydantic import BaseModel, Field


class Streak(BaseModel):
    """Current and best streak lengths in days."""

    current: int = Field(default=0, ge=0, description="Run ending today")
    best: int = Field(default=0, ge=0, description="Longest run in history")

    model_config = {"frozen": True}


class Stage(BaseModel):
    """A named tier derived from the current streak."""

    tier: int = Field(..., ge=1, le=5, description="Stage tier")
    name: str = Field(..., description="Display name")

    model_config = {"frozen": True}

    @property
    def asset(self) -> str:
        """Image file shown for this stage."""
        return f"stage-{self.tier}.svg"


class Milestone(BaseModel):
    """A day-count threshold worth celebrating."""

    days: int = Field(..., gt=0, description="Streak length needed")
    label: str = Field(..., min_length=1, description="Display label")

    model_config = {"frozen": True}


class MilestoneStatus(BaseModel):
    """Progress toward one milestone."""

    label: str
    days: int
    unlocked: bool
    remaining: int = Field(..., ge=0)

    model_config = {"frozen": True}


class JournalSummary(BaseModel):
    """Everything the dashboard shows about the journal."""

    streak: Streak
    stage: Stage
    milestones: list[MilestoneStatus] = Field(default_factory=list)
    total_entries: int = Field(default=0, ge=0)

    model_config = {"frozen": True}
