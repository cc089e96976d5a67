from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from statistics import mean
from time import perf_counter

from campus_ai.schedule_parser import ScheduleParser

_FIXED_NOW = datetime(2024, 12, 10, 6, 0, tzinfo=timezone.utc)


@dataclass(slots=True)
class BenchmarkBackend:
    completion: str = "```json\n" + json.dumps(
        {
            "title": "ミーティング",
            "datetime": "2024-12-11T15:00:00+09:00",
            "location": "会議室A",
            "notes": "明日15時に会議室Aでミーティング",
        },
        ensure_ascii=False,
    ) + "\n```"
    name: str = "benchmark"

    def complete(self, system_prompt: str, user_text: str) -> str | None:
        return self.completion


def run(iterations: int = 1000) -> None:
    parser = ScheduleParser(backend=BenchmarkBackend(), clock=lambda: _FIXED_NOW)

    timings: list[float] = []
    for _ in range(iterations):
        start = perf_counter()
        outcome = parser.run("明日15時に会議室Aでミーティング", "ja")
        timings.append(perf_counter() - start)
        assert outcome.ok

    total = sum(timings)
    print(f"Iterations: {iterations}")
    print(f"Total time: {total:.4f}s")
    print(f"Average per parse: {mean(timings)*1000:.3f} ms")
    print(f"Min/Max: {min(timings)*1000:.3f} ms / {max(timings)*1000:.3f} ms")


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    run()
