from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from campus_ai.errors import (
    DecodeError,
    GenerationError,
    ScheduleParseError,
    ValidationError,
)
from campus_ai.models import ParsedScheduleEvent, ScheduleRequest
from campus_ai.prompts import build_schedule_prompt, resolve_timezone
from campus_ai.services.llm_client import CompletionBackend
from campus_ai.utils.repair import decode_schedule_event
from campus_ai.utils.time import now_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Caller-visible result: either ``event`` or ``error`` is set."""

    event: Optional[ParsedScheduleEvent] = None
    error: Optional[ScheduleParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int:
        return 200 if self.error is None else self.error.status_code

    def to_response(self) -> dict[str, Any]:
        if self.error is not None:
            return self.error.to_response()
        if self.event is None:
            return {}
        return {"event": self.event.model_dump(exclude_unset=True)}


class ScheduleParser:
    """Free text in, one structured schedule event out.

    Intake, prompt building, a single backend call, fence stripping and
    decoding run strictly in that order. Nothing is retried and nothing is
    shared between calls.
    """

    def __init__(
        self,
        *,
        backend: CompletionBackend,
        default_locale: str = "ja",
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self.backend = backend
        self.default_locale = default_locale
        self._clock = clock

    # ------------------------------------------------------------------ Parse
    def parse(self, text: Any, locale: Any = None) -> ParsedScheduleEvent:
        request = self._intake(text, locale)

        timezone_name = resolve_timezone(request.locale)
        system_prompt = build_schedule_prompt(self._clock(), timezone_name)

        try:
            raw = self.backend.complete(system_prompt, request.text)
        except GenerationError as exc:
            raise GenerationError("Failed to parse schedule") from exc
        if not raw:
            raise GenerationError("No response from AI")

        return decode_schedule_event(raw)

    def run(self, text: Any, locale: Any = None) -> ParseOutcome:
        try:
            event = self.parse(text, locale)
        except ValidationError as exc:
            logger.info("Schedule parse rejected: %s", exc.message)
            return ParseOutcome(error=exc)
        except DecodeError as exc:
            logger.error("Schedule parse error: %s (raw=%r)", exc.message, exc.raw)
            return ParseOutcome(error=exc)
        except ScheduleParseError as exc:
            logger.error("Schedule parse error: %s (cause=%r)", exc.message, exc.__cause__)
            return ParseOutcome(error=exc)
        except Exception:
            logger.exception("Unexpected schedule parse failure")
            return ParseOutcome(error=GenerationError("Failed to parse schedule"))
        return ParseOutcome(event=event)

    # -------------------------------------------------------------- Internals
    def _intake(self, text: Any, locale: Any) -> ScheduleRequest:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Text is required")
        if locale is None:
            locale = self.default_locale
        if not isinstance(locale, str):
            raise ValidationError("Locale must be a string")
        return ScheduleRequest(text=text, locale=locale)
