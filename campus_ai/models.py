from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StrictModel(BaseModel):
    """Base class enforcing consistent validation rules."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def _parse_iso(value: str) -> dt.datetime:
    return dt.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


# --------------------------------------------------------------------- schedule
class ScheduleRequest(StrictModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = Field(min_length=1)
    locale: str = "ja"


class ParsedScheduleEvent(BaseModel):
    """Single event extracted from free text by the language model."""

    # models like to add commentary keys; those are dropped, not fatal
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(min_length=1)
    datetime: str
    location: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("datetime")
    @classmethod
    def _timezone_qualified(cls, value: str) -> str:
        try:
            parsed = _parse_iso(value)
        except ValueError as exc:
            raise ValueError("datetime must be an ISO 8601 timestamp") from exc
        if parsed.tzinfo is None:
            raise ValueError("datetime must carry a UTC offset")
        return value


class ScheduleParseBody(BaseModel):
    """Raw inbound body; presence and emptiness are checked by the parser."""

    text: Any = None
    locale: Any = None


class ParseScheduleResponse(StrictModel):
    event: ParsedScheduleEvent


class ErrorResponse(StrictModel):
    error: str
    raw: Optional[str] = None


# ------------------------------------------------------------------ translation
class TranslateRequest(StrictModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    text: Optional[str] = None
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateResponse(StrictModel):
    translated: str


# ---------------------------------------------------------------- stored events
class ScheduleEventCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    datetime: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


class StoredScheduleEvent(StrictModel):
    id: str
    user_id: str
    title: str
    datetime: str
    location: Optional[str] = None
    description: Optional[str] = None
    created_at: str


class ScheduleListResponse(StrictModel):
    events: list[StoredScheduleEvent]


class ScheduleCreateResponse(StrictModel):
    event: StoredScheduleEvent


class DeleteResponse(StrictModel):
    success: bool
