from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from campus_ai.prompts import (
    build_schedule_prompt,
    build_translate_prompt,
    iso_utc,
    resolve_timezone,
)


def test_japanese_locale_resolves_to_tokyo() -> None:
    assert resolve_timezone("ja") == "Asia/Tokyo"


@pytest.mark.parametrize("locale", ["en", "ko", "zh", "", "JA", "ja-JP"])
def test_other_locales_fall_back_to_utc(locale: str) -> None:
    assert resolve_timezone(locale) == "UTC"


def test_iso_utc_converts_offsets_and_keeps_milliseconds() -> None:
    moment = datetime(2024, 12, 10, 15, 0, 0, 123456, tzinfo=ZoneInfo("Asia/Tokyo"))
    assert iso_utc(moment) == "2024-12-10T06:00:00.123Z"


def test_schedule_prompt_embeds_moment_timezone_and_schema() -> None:
    now = datetime(2024, 12, 10, 6, 0, tzinfo=timezone.utc)

    prompt = build_schedule_prompt(now, "Asia/Tokyo")

    assert "Current date/time reference: 2024-12-10T06:00:00.000Z (Timezone: Asia/Tokyo)" in prompt
    assert "ISO 8601 datetime string in Asia/Tokyo timezone" in prompt
    for field in ("- title:", "- datetime:", "- location:", "- notes:"):
        assert field in prompt
    assert "else null" in prompt
    assert '"tomorrow" = next day' in prompt
    assert '"next week" = 7 days from now' in prompt
    assert "next Wednesday" in prompt
    assert "assume 12:00 (noon)" in prompt
    assert '{"title":"ミーティング","datetime":"2024-12-11T15:00:00+09:00"' in prompt


def test_schedule_prompt_is_deterministic() -> None:
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert build_schedule_prompt(now, "UTC") == build_schedule_prompt(now, "UTC")


def test_translate_prompt_names_known_language() -> None:
    prompt = build_translate_prompt("ko")
    assert "into Korean." in prompt
    assert "@mentions, URLs, and emoji" in prompt


def test_translate_prompt_passes_unknown_code_through() -> None:
    assert "into fr." in build_translate_prompt("fr")
