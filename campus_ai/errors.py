"""Failure kinds of the schedule parsing pipeline.

Every kind carries the HTTP status it maps to and the body the caller
sees, so the boundary can convert any of them without inspecting messages.
"""

from __future__ import annotations

from typing import Any, Literal

ErrorKind = Literal["validation", "generation", "decode"]


class ScheduleParseError(Exception):
    kind: ErrorKind
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(ScheduleParseError):
    """Required input missing or empty; raised before any backend call."""

    kind = "validation"
    status_code = 400


class GenerationError(ScheduleParseError):
    """The text-generation backend failed or returned no usable text."""

    kind = "generation"
    status_code = 500


class DecodeError(ScheduleParseError):
    """The completion could not be read as a schedule event."""

    kind = "decode"
    status_code = 500

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "raw": self.raw}
