"""streaklog - a personal journal that tracks clean-day streaks."""

__version__ = "0.1.0"
