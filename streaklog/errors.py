"""Exceptions raised by streaklog."""

from typing import Any


class StreakLogError(Exception):
    """Base class for streaklog errors."""


class InvalidEntry(StreakLogError):
    """A journal record could not be turned into a valid entry."""

    def __init__(self, record: Any, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(f"Invalid journal entry {_describe(record)}: {reason}")


class InvalidDocument(StreakLogError):
    """An import document does not have the expected shape."""


def _describe(record: Any) -> str:
    if isinstance(record, dict) and record.get("id"):
        return repr(record["id"])
    record_id = getattr(record, "id", None)
    if record_id:
        return repr(record_id)
    return repr(record)
