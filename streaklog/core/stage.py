"""Stage classification from the current streak."""

from streaklog.models import Stage

# Highest threshold first; the first match wins.
STAGE_LADDER: tuple[tuple[int, int, str], ...] = (
    (90, 5, "Legend (90+)"),
    (60, 4, "Focused (60+)"),
    (30, 3, "Steady (30+)"),
    (14, 2, "Building (14+)"),
)

STARTING_STAGE = Stage(tier=1, name="Starting (0+)")


def stage_for(current_streak: int) -> Stage:
    """Map a current streak to its stage. Total for any integer."""
    for threshold, tier, name in STAGE_LADDER:
        if current_streak >= threshold:
            return Stage(tier=tier, name=name)
    return STARTING_STAGE
