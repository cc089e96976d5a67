from __future__ import annotations

import json

import pytest

from campus_ai.errors import DecodeError
from campus_ai.utils.repair import decode_schedule_event, strip_code_fences

PAYLOAD = {
    "title": "ミーティング",
    "datetime": "2024-12-11T15:00:00+09:00",
    "location": "会議室A",
    "notes": "チームミーティング",
}


def test_strip_leaves_clean_text_alone() -> None:
    text = json.dumps(PAYLOAD, ensure_ascii=False)
    assert strip_code_fences(text) == text
    assert strip_code_fences(strip_code_fences(text)) == text


def test_strip_removes_json_fence() -> None:
    inner = '{"title": "a",\n "datetime": "2024-12-11T15:00:00Z"}'
    assert strip_code_fences(f"```json\n{inner}\n```") == inner


def test_strip_removes_bare_fence_and_whitespace() -> None:
    assert strip_code_fences('  ```\n{"a": 1}\n```  \n') == '{"a": 1}'


def test_strip_does_not_touch_interior_backticks() -> None:
    inner = '{"notes": "use ```code``` here"}'
    assert strip_code_fences(f"```json\n{inner}\n```") == inner


@pytest.mark.parametrize(
    "fenced",
    [
        "```json\n{\"a\": 1}\n```",
        "```json\n```json\n{\"a\": 1}\n```\n```",
        "```\n  ```JSON\n{\"a\": 1}```  \n```",
    ],
)
def test_strip_is_idempotent_on_fenced_input(fenced: str) -> None:
    once = strip_code_fences(fenced)
    assert once == '{"a": 1}'
    assert strip_code_fences(once) == once


def test_decode_preserves_fields() -> None:
    event = decode_schedule_event(json.dumps(PAYLOAD, ensure_ascii=False))
    assert event.model_dump() == PAYLOAD


def test_decode_accepts_fenced_completion() -> None:
    raw = "```json\n" + json.dumps(PAYLOAD) + "\n```"
    assert decode_schedule_event(raw).title == "ミーティング"


def test_decode_allows_null_location_and_missing_notes() -> None:
    event = decode_schedule_event('{"title": "Lunch", "datetime": "2024-12-11T12:00:00Z", "location": null}')
    assert event.location is None
    assert event.notes is None
    assert event.datetime == "2024-12-11T12:00:00Z"


@pytest.mark.parametrize(
    "raw",
    [
        '```json\n{"title": "a", "datetime": "2024-12-11T15:00:00+09:00",}\n```',
        '{title: "a", "datetime": "2024-12-11T15:00:00+09:00"}',
        "Sure! Here is your event.",
        "",
    ],
)
def test_malformed_completion_keeps_raw_text(raw: str) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_schedule_event(raw)
    assert excinfo.value.raw == raw
    assert excinfo.value.to_response() == {"error": "Failed to parse AI response", "raw": raw}


@pytest.mark.parametrize(
    "payload",
    [
        {"datetime": "2024-12-11T15:00:00+09:00"},
        {"title": "a"},
        {"title": "", "datetime": "2024-12-11T15:00:00+09:00"},
        {"title": "a", "datetime": "2024-12-11T15:00:00"},
        {"title": "a", "datetime": "tomorrow at 3"},
        {"title": 42, "datetime": "2024-12-11T15:00:00+09:00"},
    ],
)
def test_decode_rejects_missing_or_unqualified_fields(payload: dict) -> None:
    with pytest.raises(DecodeError):
        decode_schedule_event(json.dumps(payload))


def test_decode_rejects_non_object_json() -> None:
    with pytest.raises(DecodeError):
        decode_schedule_event(json.dumps([PAYLOAD]))
