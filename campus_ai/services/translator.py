from __future__ import annotations

import logging

from campus_ai.errors import GenerationError, ValidationError
from campus_ai.models import TranslateRequest, TranslateResponse
from campus_ai.prompts import build_translate_prompt
from campus_ai.services.llm_client import CompletionBackend

logger = logging.getLogger(__name__)


class ChatTranslator:
    """Translates chat messages through a completion backend."""

    def __init__(self, *, backend: CompletionBackend) -> None:
        self.backend = backend

    def translate(self, req: TranslateRequest) -> TranslateResponse:
        if not req.text or not req.target_language:
            raise ValidationError("text and targetLanguage are required")

        system_prompt = build_translate_prompt(req.target_language)
        try:
            completion = self.backend.complete(system_prompt, req.text)
        except GenerationError as exc:
            logger.error("Translation error: %s", exc.message)
            raise GenerationError("Translation failed") from exc

        return TranslateResponse(translated=(completion or "").strip())
