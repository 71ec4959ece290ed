"""Summary: Core application services for TodoSense.

Importance: Orchestrates todo persistence and text-analysis annotation.
Alternatives: Build a full service layer with dependency injection framework.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import hmac
import logging
from typing import Any

from todosense.analysis import TextAnalyzer
from todosense.models import PRIORITY_LEVELS, TODO_CATEGORIES, AnalysisResult, Todo
from todosense.storage.sqlite_store import SqliteStore, StoredTodo, StoredUser


logger = logging.getLogger(__name__)


def _validate_title(title: str) -> None:
    if not isinstance(title, str) or not title.strip():
        raise ValueError("Title is required")


def _validate_category(category: str | None) -> None:
    if category is not None and category not in TODO_CATEGORIES:
        raise ValueError(f"Unknown category: {category}")


def _validate_priority(priority: str | None) -> None:
    if priority is not None and priority not in PRIORITY_LEVELS:
        raise ValueError(f"Unknown priority: {priority}")


@dataclass(frozen=True)
class TodoService:
    """Summary: Manages todos and their derived attributes.

    Importance: Applies category, priority, and sentiment annotation on every write.
    Alternatives: Annotate todos in the route handlers directly.
    """

    store: SqliteStore
    analyzer: TextAnalyzer
    user_id: int

    def list_todos(
        self, category: str | None = None, completed: bool | None = None
    ) -> list[StoredTodo]:
        """Summary: List todos newest first with optional filters.

        Importance: Backs the main list view and its category/status filters.
        Alternatives: Filter client-side after fetching everything.
        """

        _validate_category(category)
        return self.store.list_todos(user_id=self.user_id, category=category, completed=completed)

    def get_todo(self, todo_id: int) -> StoredTodo | None:
        return self.store.get_todo(todo_id, user_id=self.user_id)

    def create_todo(
        self,
        title: str,
        completed: bool = False,
        category: str | None = None,
        priority: str | None = None,
    ) -> StoredTodo:
        """Summary: Create a todo annotated by the text analyzer.

        Importance: Missing or "other" categories and missing priorities are
        inferred from the title; sentiment is always computed.
        Alternatives: Require clients to supply every attribute.
        """

        _validate_title(title)
        _validate_category(category)
        _validate_priority(priority)
        if not category or category == "other":
            category = self.analyzer.classifier.suggest_category(title)
        if not priority:
            priority = self.analyzer.classifier.suggest_priority(title)
        sentiment = self.analyzer.scorer.score(title)
        todo = Todo(
            title=title,
            completed=completed,
            category=category,
            priority=priority,
            sentiment_score=sentiment.score,
        )
        stored = self.store.create_todo(todo, user_id=self.user_id)
        logger.info("Created todo %s (%s, %s).", stored.id, stored.category, stored.priority)
        return stored

    def update_todo(self, todo_id: int, **changes: Any) -> StoredTodo | None:
        """Summary: Apply a partial update, re-annotating when the title changes.

        Importance: Keeps derived attributes in sync with edited titles while
        respecting explicit category and priority choices.
        Alternatives: Recompute every attribute on every update.
        """

        updates = {key: value for key, value in changes.items() if value is not None}
        if "title" in updates:
            _validate_title(updates["title"])
        _validate_category(updates.get("category"))
        _validate_priority(updates.get("priority"))
        title = updates.get("title")
        if title:
            if not updates.get("category"):
                updates["category"] = self.analyzer.classifier.suggest_category(title)
            if not updates.get("priority"):
                updates["priority"] = self.analyzer.classifier.suggest_priority(title)
            updates["sentiment_score"] = self.analyzer.scorer.score(title).score
        updated = self.store.update_todo(todo_id, updates, user_id=self.user_id)
        if updated is None:
            logger.info("Todo %s not found for update.", todo_id)
            return None
        logger.info("Updated todo %s (%s).", todo_id, ", ".join(sorted(updates)) or "no changes")
        return updated

    def complete_todo(self, todo_id: int, completed: bool = True) -> StoredTodo | None:
        """Summary: Mark a todo as completed or reopen it.

        Importance: Supports the checkbox toggle without touching other fields.
        Alternatives: Route completion through update_todo only.
        """

        return self.update_todo(todo_id, completed=completed)

    def delete_todo(self, todo_id: int) -> bool:
        """Summary: Delete a todo.

        Importance: Lets users clear finished or mistaken entries.
        Alternatives: Archive todos instead of deleting them.
        """

        deleted = self.store.delete_todo(todo_id, user_id=self.user_id)
        if deleted:
            logger.info("Deleted todo %s.", todo_id)
        return deleted


@dataclass(frozen=True)
class SuggestionService:
    """Summary: Produces follow-up suggestions from the current todo list.

    Importance: Connects stored titles to the suggestion generator.
    Alternatives: Let clients send their titles with each request.
    """

    store: SqliteStore
    analyzer: TextAnalyzer
    user_id: int

    def suggest(self) -> str:
        titles = self.store.list_todo_titles(user_id=self.user_id)
        suggestion = self.analyzer.suggest(titles)
        logger.debug("Suggested %r from %s titles.", suggestion, len(titles))
        return suggestion


@dataclass(frozen=True)
class AnalysisService:
    """Summary: Analyzes free text without creating a todo.

    Importance: Lets clients preview derived attributes while typing.
    Alternatives: Create and delete a throwaway todo.
    """

    analyzer: TextAnalyzer

    def analyze(self, text: str) -> AnalysisResult:
        return self.analyzer.analyze(text)


@dataclass(frozen=True)
class UserService:
    """Summary: Manages user accounts.

    Importance: Provides account creation and password checks.
    Alternatives: Use an external identity provider.
    """

    store: SqliteStore
    token_secret: str

    def create_user(self, username: str, password: str) -> int:
        """Summary: Create a user with a hashed password.

        Importance: Avoids storing raw passwords in the database.
        Alternatives: Delegate authentication to an OAuth provider.
        """

        if not username:
            raise ValueError("Username is required")
        if self.store.get_user_by_username(username) is not None:
            raise ValueError(f"User {username} already exists")
        user_id = self.store.create_user(username, self._hash_password(password))
        logger.info("Created user %s.", username)
        return user_id

    def get_user(self, user_id: int) -> StoredUser | None:
        return self.store.get_user(user_id)

    def get_user_by_username(self, username: str) -> StoredUser | None:
        return self.store.get_user_by_username(username)

    def verify_password(self, username: str, password: str) -> bool:
        """Summary: Check a password against the stored hash.

        Importance: Enables simple login flows.
        Alternatives: Use session tokens issued by an identity provider.
        """

        user = self.store.get_user_by_username(username)
        if user is None:
            return False
        return hmac.compare_digest(user.password_hash, self._hash_password(password))

    def _hash_password(self, password: str) -> str:
        """Summary: Hash a password with a secret salt.

        Importance: Avoids storing raw passwords in the database.
        Alternatives: Use bcrypt or argon2.
        """

        salt = self.token_secret or "todosense"
        return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class StatsService:
    """Summary: Provides lightweight analytics and counts.

    Importance: Enables dashboards and quick health checks.
    Alternatives: Calculate counts directly in the API or UI.
    """

    store: SqliteStore
    user_id: int

    def snapshot(self) -> dict[str, Any]:
        """Summary: Return counts of todos overall and per attribute.

        Importance: Provides a simple metrics view for the dashboard.
        Alternatives: Build a full analytics pipeline.
        """

        by_completed = self.store.count_todos_by("completed", user_id=self.user_id)
        by_category = self.store.count_todos_by("category", user_id=self.user_id)
        by_priority = self.store.count_todos_by("priority", user_id=self.user_id)
        return {
            "todos": self.store.count_todos(user_id=self.user_id),
            "completed": by_completed.get("1", 0),
            "categories": {category: by_category.get(category, 0) for category in TODO_CATEGORIES},
            "priorities": {priority: by_priority.get(priority, 0) for priority in PRIORITY_LEVELS},
        }
