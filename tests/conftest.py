from __future__ import annotations

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 12, 10, 6, 0, tzinfo=timezone.utc)


class StubBackend:
    """Completion backend double that records every call."""

    name = "stub"

    def __init__(self, completion: str | None = None, error: Exception | None = None) -> None:
        self.completion = completion
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def complete(self, system_prompt: str, user_text: str) -> str | None:
        self.calls.append((system_prompt, user_text))
        if self.error is not None:
            raise self.error
        return self.completion


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def stub_backend_factory():
    return StubBackend
