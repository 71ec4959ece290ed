"""Summary: Tests for user accounts.

Importance: Ensures passwords are hashed and verified correctly.
Alternatives: Validate accounts manually via the CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from todosense.services import UserService
from todosense.storage.sqlite_store import SqliteStore


def _service(tmp_path: Path, secret: str = "secret") -> UserService:
    store = SqliteStore(str(tmp_path / "test.db"))
    store.initialize()
    return UserService(store=store, token_secret=secret)


def test_create_user_hashes_password(tmp_path: Path) -> None:
    """Summary: Verify raw passwords never reach storage.

    Importance: Limits damage if the database leaks.
    Alternatives: Store raw passwords.
    """

    service = _service(tmp_path)
    user_id = service.create_user("alice", "hunter2")
    stored = service.get_user(user_id)
    assert stored is not None
    assert stored.username == "alice"
    assert stored.password_hash != "hunter2"
    assert service.verify_password("alice", "hunter2") is True
    assert service.verify_password("alice", "wrong") is False
    assert service.verify_password("missing", "hunter2") is False


def test_create_user_rejects_duplicates(tmp_path: Path) -> None:
    """Summary: Verify usernames are unique."""

    service = _service(tmp_path)
    service.create_user("alice", "one")
    with pytest.raises(ValueError):
        service.create_user("alice", "two")
    with pytest.raises(ValueError):
        service.create_user("", "three")
