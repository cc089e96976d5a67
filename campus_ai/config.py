from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_api_host: str = os.getenv(
        "OPENAI_API_HOST", "https://api.openai.com/v1"
    )

    llm_provider: str = os.getenv("LLM_PROVIDER", "openai")
    openrouter_api_key: str = os.getenv("OPENROUTER_API_KEY", "")
    openrouter_api_host: str = os.getenv(
        "OPENROUTER_API_HOST", "https://openrouter.ai/api/v1"
    )

    schedule_model: str = os.getenv("SCHEDULE_MODEL", "gpt-4.1-mini")
    default_locale: str = os.getenv("DEFAULT_LOCALE", "ja")

    translate_model: str = os.getenv("TRANSLATE_MODEL", "gpt-4o-mini")
    translate_temperature: float = float(os.getenv("TRANSLATE_TEMPERATURE", 0.3))
    translate_max_tokens: int = int(os.getenv("TRANSLATE_MAX_TOKENS", 1000))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", 8000))
    sqlite_db_path: str = os.getenv("SQLITE_DB_PATH", "campus_schedule.db")

    def model_post_init(self, __context: dict[str, object]) -> None:
        logger = logging.getLogger(__name__)
        provider = (self.llm_provider or "openai").lower()
        if provider == "openai" and not self.openai_api_key:
            logger.warning(
                "OPENAI_API_KEY is not configured. Schedule parsing and translation will fail."
            )
        if provider == "openrouter" and not (
            self.openrouter_api_key or self.openai_api_key
        ):
            logger.warning(
                "OpenRouter credentials are missing. Schedule parsing and translation will fail."
            )


settings = Settings()
