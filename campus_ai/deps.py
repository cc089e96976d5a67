from __future__ import annotations

from campus_ai.config import settings
from campus_ai.schedule_parser import ScheduleParser
from campus_ai.services.llm_client import build_schedule_backend, build_translate_backend
from campus_ai.services.sqlite_store import ScheduleSQLiteStore
from campus_ai.services.translator import ChatTranslator

_parser: ScheduleParser | None = None
_translator: ChatTranslator | None = None
_store: ScheduleSQLiteStore | None = None


def get_schedule_parser() -> ScheduleParser:
    global _parser
    if _parser is None:
        _parser = ScheduleParser(
            backend=build_schedule_backend(settings),
            default_locale=settings.default_locale,
        )
    return _parser


def get_translator() -> ChatTranslator:
    global _translator
    if _translator is None:
        _translator = ChatTranslator(backend=build_translate_backend(settings))
    return _translator


def get_store() -> ScheduleSQLiteStore:
    global _store
    if _store is None:
        _store = ScheduleSQLiteStore(settings.sqlite_db_path)
    return _store
