"""JournalEntry data model."""

import uuid
from datetime import date as date_type
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from streaklog.errors import InvalidEntry


class DayType(str, Enum):
    """How a logged day went. Only ``slip`` breaks a streak."""

    CLEAN = "clean"
    URGE = "urge"
    SLIP = "slip"


def _new_id() -> str:
    return uuid.uuid4().hex


class JournalEntry(BaseModel):
    """Represents one day in the journal."""

    id: str = Field(default_factory=_new_id, min_length=1, description="Entry identifier")
    date: date_type = Field(..., description="Calendar day of the entry")
    day_type: DayType = Field(default=DayType.CLEAN, alias="dayType", description="Day type tag")
    energy: int = Field(default=6, ge=1, le=10, description="Energy rating")
    mood: int = Field(default=6, ge=1, le=10, description="Mood rating")
    headline: str = Field(default="", description="Short title for the day")
    facts: str = Field(default="", description="What happened")
    analysis: str = Field(default="", description="Why it happened")
    action: str = Field(default="", description="What to do next")
    updated_at: datetime = Field(
        default_factory=datetime.now, alias="updatedAt", description="Last write time"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> date_type:
        # Deferred: streaklog.core imports this module
        from streaklog.core.dates import parse_day_key, to_calendar_day

        if isinstance(value, str):
            return parse_day_key(value)
        if isinstance(value, (datetime, date_type)):
            return to_calendar_day(value)
        raise ValueError(f"expected a YYYY-MM-DD day key, got {type(value).__name__}")

    @field_validator("headline", "facts", "analysis", "action", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        # Older exports may carry null for unset text fields
        return "" if value is None else value

    @field_validator("updated_at", mode="before")
    @classmethod
    def _parse_updated_at(cls, value: Any) -> Any:
        # Exported documents store epoch milliseconds
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value / 1000)
            except (OverflowError, OSError) as exc:
                raise ValueError(f"timestamp out of range: {value}") from exc
        return value

    @field_validator("updated_at")
    @classmethod
    def _naive_local(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @field_serializer("updated_at", when_used="json")
    def _dump_updated_at(self, value: datetime) -> int:
        return int(value.timestamp() * 1000)

    @property
    def day_key(self) -> str:
        """Canonical YYYY-MM-DD key of the entry's day."""
        return self.date.isoformat()

    @property
    def is_qualifying(self) -> bool:
        """True unless the day is a slip."""
        return self.day_type is not DayType.SLIP

    def to_record(self) -> dict:
        """Serialize to the JSON document shape (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: Any) -> "JournalEntry":
        """Validate a raw record, raising InvalidEntry if it is malformed."""
        if isinstance(record, cls):
            return record
        try:
            return cls.model_validate(record)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "record"
            raise InvalidEntry(record, f"{location}: {first['msg']}") from exc
