from __future__ import annotations

import json
import re

from pydantic import ValidationError as PydanticValidationError

from campus_ai.errors import DecodeError
from campus_ai.models import ParsedScheduleEvent

_LEADING_FENCE = re.compile(r"\A\s*```[A-Za-z0-9_-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*\Z")


def strip_code_fences(text: str) -> str:
    """Drop Markdown fences around a completion and trim whitespace.

    Fences are peeled from the very start and the very end until none are
    left, so anything inside the payload is left alone and already clean
    text comes back unchanged.
    """

    cleaned = text.strip()
    while True:
        stripped = _LEADING_FENCE.sub("", cleaned, count=1)
        stripped = _TRAILING_FENCE.sub("", stripped, count=1).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def decode_schedule_event(raw: str) -> ParsedScheduleEvent:
    """Read a raw completion as a ParsedScheduleEvent or raise DecodeError."""

    cleaned = strip_code_fences(raw)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise DecodeError("Failed to parse AI response", raw=raw) from exc

    if not isinstance(payload, dict):
        raise DecodeError("Failed to parse AI response", raw=raw)

    try:
        return ParsedScheduleEvent.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError("Failed to parse AI response", raw=raw) from exc
