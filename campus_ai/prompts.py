from __future__ import annotations

from datetime import datetime, timezone

TIMEZONE_BY_LOCALE = {
    "ja": "Asia/Tokyo",
}
FALLBACK_TIMEZONE = "UTC"


def resolve_timezone(locale: str) -> str:
    """Map a locale to the timezone used for relative dates.

    Only Japanese users get a local zone; any other locale, known or not,
    resolves to UTC.
    """

    return TIMEZONE_BY_LOCALE.get(locale, FALLBACK_TIMEZONE)


def iso_utc(moment: datetime) -> str:
    """Serialize as ``2024-12-10T06:00:00.000Z``."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


SCHEDULE_SYSTEM_TEMPLATE = """You are a schedule parsing assistant. Extract a single event from the user's text and output strict JSON.

Current date/time reference: {now} (Timezone: {timezone})

Fields to extract:
- title: short title of the event (string, required)
- datetime: ISO 8601 datetime string in {timezone} timezone (string, required)
- location: short location text if given, else null
- notes: original text or additional notes if helpful

When parsing relative dates:
- "明日" / "tomorrow" = next day
- "来週" / "next week" = 7 days from now
- "来週水曜" / "next Wednesday" = the Wednesday of next week
- If time is not specified, assume 12:00 (noon)

Return ONLY valid JSON, no extra text or markdown.
Example output: {{"title":"ミーティング","datetime":"2024-12-11T15:00:00+09:00","location":"会議室A","notes":"チームミーティング"}}"""


def build_schedule_prompt(now: datetime, timezone_name: str) -> str:
    return SCHEDULE_SYSTEM_TEMPLATE.format(now=iso_utc(now), timezone=timezone_name)


LANGUAGE_NAMES = {
    "en": "English",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
}

TRANSLATE_SYSTEM_TEMPLATE = (
    "You are a translation assistant. Translate the user's message into {language}.\n"
    "Return only the translated text, no explanations or additional formatting.\n"
    "Preserve any @mentions, URLs, and emoji in the original format."
)


def build_translate_prompt(target_language: str) -> str:
    language = LANGUAGE_NAMES.get(target_language, target_language)
    return TRANSLATE_SYSTEM_TEMPLATE.format(language=language)
