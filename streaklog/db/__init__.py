"""Local storage for streaklog."""

from streaklog.db.store import DataStore

__all__ = ["DataStore"]
