"""Summary: SQLite storage implementation for TodoSense.

Importance: Provides a local-first persistence layer for todos and users.
Alternatives: Use an ORM or an external database immediately.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from todosense.models import Todo

_TODO_COLUMNS = "id, title, completed, category, priority, sentiment_score, created_at"
_UPDATABLE_COLUMNS = ("title", "completed", "category", "priority", "sentiment_score")
_COUNTABLE_COLUMNS = ("category", "priority", "completed")


@dataclass(frozen=True)
class StoredTodo:
    """Summary: Todo record with database identifier.

    Importance: Lets clients address todos for updates and deletion.
    Alternatives: Use the title as a natural key.
    """

    id: int
    title: str
    completed: bool
    category: str
    priority: str | None
    sentiment_score: int | None
    created_at: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "category": self.category,
            "priority": self.priority,
            "sentiment_score": self.sentiment_score,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class StoredUser:
    """Summary: User record with database identifier.

    Importance: Enables per-user todo ownership.
    Alternatives: Keep only a single implicit user without records.
    """

    id: int
    username: str
    password_hash: str


class SqliteStore:
    """Summary: SQLite-backed storage for TodoSense.

    Importance: Enables local-first persistence with minimal dependencies.
    Alternatives: Use Postgres and SQLAlchemy from day one.
    """

    def __init__(self, db_path: str) -> None:
        """Summary: Initialize the storage with a database path.

        Importance: Allows configurable database location per environment.
        Alternatives: Hardcode a default path in the class.
        """

        self._db_path = Path(db_path)

    def initialize(self) -> None:
        """Summary: Create tables if they do not exist.

        Importance: Ensures the database is ready before the first request.
        Alternatives: Run migrations using a dedicated migration tool.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER,
                    title TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0,
                    category TEXT NOT NULL DEFAULT 'work',
                    priority TEXT DEFAULT 'medium',
                    sentiment_score INTEGER DEFAULT 0,
                    created_at TEXT NOT NULL
                )
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL
                )
                """
            )
            connection.commit()

    def create_user(self, username: str, password_hash: str) -> int:
        """Summary: Insert a user and return its ID.

        Importance: Registers a new owner for todos.
        Alternatives: Create users lazily on first login.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "INSERT INTO users (username, password_hash) VALUES (?, ?)",
                (username, password_hash),
            )
            user_id = cursor.lastrowid
            connection.commit()
        return int(user_id)

    def ensure_user(self, username: str, password_hash: str = "") -> int:
        """Summary: Ensure a user exists and return their ID.

        Importance: Provides a stable owner for single-user deployments.
        Alternatives: Omit user records in single-user mode.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "INSERT OR IGNORE INTO users (username, password_hash) VALUES (?, ?)",
                (username, password_hash),
            )
            if cursor.rowcount:
                user_id = cursor.lastrowid
            else:
                cursor.execute("SELECT id FROM users WHERE username = ?", (username,))
                row = cursor.fetchone()
                user_id = int(row[0]) if row else 0
            connection.commit()
        return int(user_id)

    def get_user(self, user_id: int) -> StoredUser | None:
        """Summary: Fetch a user by ID."""

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "SELECT id, username, password_hash FROM users WHERE id = ?", (user_id,)
            )
            row = cursor.fetchone()
        return StoredUser(*row) if row else None

    def get_user_by_username(self, username: str) -> StoredUser | None:
        """Summary: Fetch a user by username.

        Importance: Supports login and duplicate checks.
        Alternatives: Use user IDs only.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "SELECT id, username, password_hash FROM users WHERE username = ?",
                (username,),
            )
            row = cursor.fetchone()
        return StoredUser(*row) if row else None

    def create_todo(self, todo: Todo, user_id: int | None = None) -> StoredTodo:
        """Summary: Persist a todo and return the stored record.

        Importance: Returns the ID and timestamp the client needs to render it.
        Alternatives: Return only the new row ID.
        """

        created_at = datetime.now(timezone.utc).isoformat()
        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                INSERT INTO todos (
                    user_id, title, completed, category, priority, sentiment_score, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    todo.title,
                    int(todo.completed),
                    todo.category,
                    todo.priority,
                    todo.sentiment_score,
                    created_at,
                ),
            )
            todo_id = cursor.lastrowid
            connection.commit()
        return StoredTodo(
            id=int(todo_id),
            title=todo.title,
            completed=todo.completed,
            category=todo.category,
            priority=todo.priority,
            sentiment_score=todo.sentiment_score,
            created_at=created_at,
        )

    def get_todo(self, todo_id: int, user_id: int | None = None) -> StoredTodo | None:
        """Summary: Fetch a single todo by ID.

        Importance: Backs detail views and update checks.
        Alternatives: Filter the full list in memory.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            if user_id is None:
                cursor.execute(f"SELECT {_TODO_COLUMNS} FROM todos WHERE id = ?", (todo_id,))
            else:
                cursor.execute(
                    f"SELECT {_TODO_COLUMNS} FROM todos WHERE id = ? AND user_id = ?",
                    (todo_id, user_id),
                )
            row = cursor.fetchone()
        return _row_to_todo(row) if row else None

    def list_todos(
        self,
        user_id: int | None = None,
        category: str | None = None,
        completed: bool | None = None,
    ) -> list[StoredTodo]:
        """Summary: Retrieve todos, newest first.

        Importance: Provides the main list view with optional filters.
        Alternatives: Filter client-side after loading everything.
        """

        clauses: list[str] = []
        params: list[Any] = []
        if user_id is not None:
            clauses.append("user_id = ?")
            params.append(user_id)
        if category is not None:
            clauses.append("category = ?")
            params.append(category)
        if completed is not None:
            clauses.append("completed = ?")
            params.append(int(completed))
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                f"SELECT {_TODO_COLUMNS} FROM todos {where} ORDER BY created_at DESC, id DESC",
                params,
            )
            rows = cursor.fetchall()
        return [_row_to_todo(row) for row in rows]

    def list_todo_titles(self, user_id: int | None = None) -> list[str]:
        """Summary: Return todo titles, newest first.

        Importance: Feeds the suggestion generator without loading full records.
        Alternatives: Map titles from list_todos.
        """

        return [todo.title for todo in self.list_todos(user_id=user_id)]

    def update_todo(
        self, todo_id: int, changes: dict[str, Any], user_id: int | None = None
    ) -> StoredTodo | None:
        """Summary: Apply a partial update and return the updated record.

        Importance: Supports edits and completion toggles.
        Alternatives: Replace the full row on every update.
        """

        unknown = set(changes) - set(_UPDATABLE_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown todo fields: {', '.join(sorted(unknown))}")
        if self.get_todo(todo_id, user_id=user_id) is None:
            return None
        if changes:
            assignments = ", ".join(f"{column} = ?" for column in changes)
            values = [int(value) if column == "completed" else value for column, value in changes.items()]
            with self._connection() as connection:
                cursor = connection.cursor()
                cursor.execute(
                    f"UPDATE todos SET {assignments} WHERE id = ?",
                    (*values, todo_id),
                )
                connection.commit()
        return self.get_todo(todo_id, user_id=user_id)

    def delete_todo(self, todo_id: int, user_id: int | None = None) -> bool:
        """Summary: Delete a todo and report whether it existed.

        Importance: Lets the API distinguish deletes from missing records.
        Alternatives: Soft-delete with a flag column.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            if user_id is None:
                cursor.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
            else:
                cursor.execute(
                    "DELETE FROM todos WHERE id = ? AND user_id = ?", (todo_id, user_id)
                )
            deleted = cursor.rowcount > 0
            connection.commit()
        return deleted

    def count_todos(self, user_id: int | None = None) -> int:
        """Summary: Count todos."""

        with self._connection() as connection:
            cursor = connection.cursor()
            if user_id is None:
                cursor.execute("SELECT COUNT(*) FROM todos")
            else:
                cursor.execute("SELECT COUNT(*) FROM todos WHERE user_id = ?", (user_id,))
            row = cursor.fetchone()
        return int(row[0]) if row else 0

    def count_todos_by(self, column: str, user_id: int | None = None) -> dict[str, int]:
        """Summary: Count todos grouped by a column.

        Importance: Powers per-category and per-priority dashboards.
        Alternatives: Aggregate in Python over list_todos.
        """

        if column not in _COUNTABLE_COLUMNS:
            raise ValueError(f"Cannot group todos by {column}")
        with self._connection() as connection:
            cursor = connection.cursor()
            if user_id is None:
                cursor.execute(f"SELECT {column}, COUNT(*) FROM todos GROUP BY {column}")
            else:
                cursor.execute(
                    f"SELECT {column}, COUNT(*) FROM todos WHERE user_id = ? GROUP BY {column}",
                    (user_id,),
                )
            rows = cursor.fetchall()
        return {str(key): int(count) for key, count in rows}

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Summary: Context manager for SQLite connections.

        Importance: Ensures connections are closed cleanly after use.
        Alternatives: Keep a single long-lived connection.
        """

        connection = sqlite3.connect(self._db_path)
        try:
            yield connection
        finally:
            connection.close()


def _row_to_todo(row: tuple[Any, ...]) -> StoredTodo:
    todo_id, title, completed, category, priority, sentiment_score, created_at = row
    return StoredTodo(
        id=int(todo_id),
        title=title,
        completed=bool(completed),
        category=category,
        priority=priority,
        sentiment_score=sentiment_score,
        created_at=created_at,
    )
