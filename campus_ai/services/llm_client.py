from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from openai import OpenAI, OpenAIError

from campus_ai.config import Settings, settings as default_settings
from campus_ai.errors import GenerationError

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionBackend(Protocol):
    """Two-turn exchange (system, user) returning one completion text."""

    name: str

    def complete(self, system_prompt: str, user_text: str) -> str | None: ...


class OfflineBackend:
    """Stand-in used when credentials are missing; every call fails."""

    def __init__(self, name: str = "offline") -> None:
        self.name = name

    def complete(self, system_prompt: str, user_text: str) -> str | None:
        logger.info("LLM provider '%s' operating in offline mode", self.name)
        raise GenerationError(f"LLM provider '{self.name}' is not configured")


def _build_openai_client(
    *,
    api_host: str,
    api_key: str,
    default_headers: dict[str, str] | None = None,
) -> OpenAI:
    try:
        # one attempt per request; failures go straight back to the caller
        return OpenAI(
            api_key=api_key,
            base_url=api_host or None,
            default_headers=default_headers,
            max_retries=0,
        )
    except OpenAIError as exc:
        logger.error("Failed to initialise OpenAI client: %s", exc)
        raise GenerationError("OpenAI client is not configured") from exc


class OpenAIResponsesBackend:
    """Completion backend on top of the OpenAI Responses API."""

    name = "openai"

    def __init__(self, *, client: OpenAI, model: str) -> None:
        self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def complete(self, system_prompt: str, user_text: str) -> str | None:
        try:
            response = self._client.responses.create(
                model=self._model,
                input=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_text},
                ],
            )
        except OpenAIError as exc:
            logger.error("Responses call to %s failed: %s", self._model, exc)
            raise GenerationError(str(exc)) from exc

        output_text = getattr(response, "output_text", None)
        if not output_text:
            logger.warning("LLM returned an empty completion (model=%s)", self._model)
            return None
        return output_text


class OpenAIChatBackend:
    """Completion backend on top of Chat Completions."""

    name = "openai-chat"

    def __init__(
        self,
        *,
        client: OpenAI,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    def complete(self, system_prompt: str, user_text: str) -> str | None:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_text},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            logger.error("Chat completion with %s failed: %s", self._model, exc)
            raise GenerationError(str(exc)) from exc

        if not response.choices:
            return None
        content = response.choices[0].message.content
        return content or None


def _resolve_credentials(cfg: Settings) -> tuple[str, str, str, dict[str, str] | None]:
    provider_key = (cfg.llm_provider or "openai").lower()
    if provider_key == "openai":
        return provider_key, cfg.openai_api_host, cfg.openai_api_key, None
    if provider_key == "openrouter":
        return (
            provider_key,
            cfg.openrouter_api_host,
            cfg.openrouter_api_key or cfg.openai_api_key,
            {"X-Title": "Campus AI"},
        )
    logger.warning("Unknown LLM provider '%s'; falling back to offline mode", provider_key)
    return provider_key, "", "", None


def build_schedule_backend(cfg: Settings | None = None) -> CompletionBackend:
    cfg = cfg or default_settings
    provider_key, host, api_key, headers = _resolve_credentials(cfg)
    if not api_key:
        return OfflineBackend(provider_key)
    try:
        client = _build_openai_client(api_host=host, api_key=api_key, default_headers=headers)
    except GenerationError:
        return OfflineBackend(provider_key)
    return OpenAIResponsesBackend(client=client, model=cfg.schedule_model)


def build_translate_backend(cfg: Settings | None = None) -> CompletionBackend:
    cfg = cfg or default_settings
    provider_key, host, api_key, headers = _resolve_credentials(cfg)
    if not api_key:
        return OfflineBackend(provider_key)
    try:
        client = _build_openai_client(api_host=host, api_key=api_key, default_headers=headers)
    except GenerationError:
        return OfflineBackend(provider_key)
    return OpenAIChatBackend(
        client=client,
        model=cfg.translate_model,
        temperature=cfg.translate_temperature,
        max_tokens=cfg.translate_max_tokens,
    )
