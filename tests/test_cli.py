"""Summary: Tests for the command-line interface.

Importance: Ensures CLI commands drive the same services as the API.
Alternatives: Validate the CLI manually.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todosense.cli import run_cli


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Summary: Provide a working directory with config defaults.

    Importance: AppConfig.from_env reads config/defaults.json relative to the cwd.
    Alternatives: Patch AppConfig.from_env directly.
    """

    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "defaults.json").write_text(
        json.dumps(
            {
                "db_path": str(tmp_path / "cli.db"),
                "api_host": "127.0.0.1",
                "api_port": "8000",
                "api_key": "",
                "default_user_name": "local",
                "token_secret": "",
                "suggestion_seed": "5",
                "log_level": "WARNING",
            }
        ),
        encoding="utf-8",
    )
    for name in ["TODOSENSE_DB_PATH", "TODOSENSE_DEFAULT_USER_NAME", "TODOSENSE_SUGGESTION_SEED"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_add_list_complete_delete(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Verify the todo lifecycle through the CLI.

    Importance: Confirms the CLI shares annotation rules with the API.
    Alternatives: Test only the service layer.
    """

    run_cli(["add", "Call the client tomorrow"])
    output = capsys.readouterr().out
    assert "Added 1: [ ] Call the client tomorrow (work, high" in output

    run_cli(["complete", "1"])
    assert "[x]" in capsys.readouterr().out

    run_cli(["list", "--completed"])
    assert "Call the client tomorrow" in capsys.readouterr().out

    run_cli(["list", "--active"])
    assert capsys.readouterr().out.strip() == "No todos."

    run_cli(["delete", "1"])
    assert "Deleted todo 1." in capsys.readouterr().out

    with pytest.raises(SystemExit):
        run_cli(["show", "1"])


def test_cli_analyze_and_suggest(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Verify analysis and suggestion commands."""

    run_cli(["analyze", "maybe sometime later"])
    output = capsys.readouterr().out
    assert "priority: low" in output
    assert "category: other" in output

    run_cli(["suggest"])
    assert capsys.readouterr().out.strip() == "Add your first task!"


def test_cli_stats(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Verify stats output."""

    run_cli(["add", "Buy milk"])
    capsys.readouterr()
    run_cli(["stats"])
    output = capsys.readouterr().out
    assert "todos: 1" in output
    assert "shopping=1" in output


def test_cli_rejects_blank_title(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Verify blank titles exit with a message instead of being stored."""

    with pytest.raises(SystemExit, match="Title is required"):
        run_cli(["add", ""])
    run_cli(["add", "Buy milk"])
    capsys.readouterr()
    with pytest.raises(SystemExit, match="Title is required"):
        run_cli(["update", "1", "--title", ""])
    run_cli(["show", "1"])
    assert "Buy milk" in capsys.readouterr().out
