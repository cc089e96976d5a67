from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from campus_ai.models import ScheduleEventCreate, StoredScheduleEvent


def _ensure_parent(path: Path) -> None:
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


def _iso_to_timestamp(value: str) -> float:
    iso_value = value.strip().replace("Z", "+00:00")
    dt = datetime.fromisoformat(iso_value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


class ScheduleSQLiteStore:
    """Per-user schedule events kept in a local SQLite file."""

    def __init__(self, db_path: str) -> None:
        self.path = Path(db_path)
        if db_path != ":memory:":
            _ensure_parent(self.path)
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._ensure_schema()

    # ------------------------------------------------------------------ events
    def list_events(self, user_id: str) -> list[StoredScheduleEvent]:
        cur = self._conn.execute(
            (
                "SELECT id, user_id, title, datetime, location, description, created_at "
                "FROM schedule_events WHERE user_id = ? "
                "ORDER BY datetime_ts ASC"
            ),
            (user_id,),
        )
        return [self._row_to_event(row) for row in cur.fetchall()]

    def create_event(self, user_id: str, data: ScheduleEventCreate) -> StoredScheduleEvent:
        if not data.title or not data.datetime:
            raise ValueError("title and datetime are required")

        event = StoredScheduleEvent(
            id=str(uuid4()),
            user_id=user_id,
            title=data.title,
            datetime=data.datetime,
            location=data.location or None,
            description=data.description or None,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        with self._conn:
            self._conn.execute(
                (
                    "INSERT INTO schedule_events"
                    "(id, user_id, title, datetime, datetime_ts, location, description, created_at) "
                    "VALUES(?, ?, ?, ?, ?, ?, ?, ?)"
                ),
                (
                    event.id,
                    event.user_id,
                    event.title,
                    event.datetime,
                    _iso_to_timestamp(event.datetime),
                    event.location,
                    event.description,
                    event.created_at,
                ),
            )
        return event

    def delete_event(self, user_id: str, event_id: str) -> bool:
        with self._conn:
            cur = self._conn.execute(
                "DELETE FROM schedule_events WHERE id = ? AND user_id = ?",
                (event_id, user_id),
            )
        return cur.rowcount > 0

    # -------------------------------------------------------------------- utils
    def close(self) -> None:
        self._conn.close()

    def _ensure_schema(self) -> None:
        with self._conn:
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS schedule_events (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    datetime TEXT NOT NULL,
                    datetime_ts REAL NOT NULL,
                    location TEXT,
                    description TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            self._conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_schedule_events_user "
                "ON schedule_events(user_id, datetime_ts)"
            )

    @staticmethod
    def _row_to_event(row: sqlite3.Row) -> StoredScheduleEvent:
        return StoredScheduleEvent(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            datetime=row["datetime"],
            location=row["location"],
            description=row["description"],
            created_at=row["created_at"],
        )
