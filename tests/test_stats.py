"""Summary: Tests for stats snapshot.

Importance: Ensures analytics counts reflect stored data.
Alternatives: Validate stats manually via the API.
"""

from __future__ import annotations

from pathlib import Path

from todosense.models import Todo
from todosense.services import StatsService
from todosense.storage.sqlite_store import SqliteStore


def test_stats_snapshot(tmp_path: Path) -> None:
    """Summary: Verify stats include totals and per-attribute counts.

    Importance: Confirms dashboard metrics are populated.
    Alternatives: Use direct SQL queries in the API.
    """

    store = SqliteStore(str(tmp_path / "test.db"))
    store.initialize()
    user_id = store.ensure_user("local")
    store.create_todo(Todo(title="Report", category="work", priority="high"), user_id=user_id)
    store.create_todo(
        Todo(title="Milk", category="shopping", priority="low", completed=True), user_id=user_id
    )
    store.create_todo(Todo(title="Other user"), user_id=user_id + 1)
    stats = StatsService(store=store, user_id=user_id).snapshot()
    assert stats["todos"] == 2
    assert stats["completed"] == 1
    assert stats["categories"] == {"work": 1, "personal": 0, "shopping": 1, "other": 0}
    assert stats["priorities"] == {"high": 1, "medium": 0, "low": 1}
