"""Summary: Command-line interface for TodoSense.

Importance: Provides a local-first entry point for managing todos.
Alternatives: Build a web UI or desktop client first.
"""

from __future__ import annotations

import argparse
import logging

from todosense.app import build_services
from todosense.config import AppConfig
from todosense.models import PRIORITY_LEVELS, TODO_CATEGORIES
from todosense.storage.sqlite_store import StoredTodo


def build_parser() -> argparse.ArgumentParser:
    """Summary: Build the CLI argument parser.

    Importance: Defines supported commands for local operation.
    Alternatives: Use a CLI framework like Typer or Click.
    """

    parser = argparse.ArgumentParser(description="TodoSense CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add a todo")
    add.add_argument("title", type=str)
    add.add_argument("--category", choices=TODO_CATEGORIES, default=None)
    add.add_argument("--priority", choices=PRIORITY_LEVELS, default=None)

    list_todos = subparsers.add_parser("list", help="List todos")
    list_todos.add_argument("--category", choices=TODO_CATEGORIES, default=None)
    status = list_todos.add_mutually_exclusive_group()
    status.add_argument("--completed", dest="completed", action="store_true", default=None)
    status.add_argument("--active", dest="completed", action="store_false")
    list_todos.set_defaults(completed=None)

    show = subparsers.add_parser("show", help="Show a todo")
    show.add_argument("todo_id", type=int)

    update = subparsers.add_parser("update", help="Update a todo")
    update.add_argument("todo_id", type=int)
    update.add_argument("--title", type=str, default=None)
    update.add_argument("--category", choices=TODO_CATEGORIES, default=None)
    update.add_argument("--priority", choices=PRIORITY_LEVELS, default=None)

    complete = subparsers.add_parser("complete", help="Mark a todo as completed")
    complete.add_argument("todo_id", type=int)
    complete.add_argument("--undo", action="store_true", help="Reopen the todo")

    delete = subparsers.add_parser("delete", help="Delete a todo")
    delete.add_argument("todo_id", type=int)

    analyze = subparsers.add_parser("analyze", help="Analyze text without saving it")
    analyze.add_argument("text", type=str)

    subparsers.add_parser("suggest", help="Suggest a follow-up task")
    subparsers.add_parser("stats", help="Show todo statistics")

    add_user = subparsers.add_parser("add-user", help="Create a user")
    add_user.add_argument("username", type=str)
    add_user.add_argument("password", type=str)

    return parser


def _format_todo(todo: StoredTodo) -> str:
    mark = "x" if todo.completed else " "
    return (
        f"{todo.id}: [{mark}] {todo.title} "
        f"({todo.category}, {todo.priority}, sentiment {todo.sentiment_score})"
    )


def run_cli(argv: list[str] | None = None) -> None:
    """Summary: Execute CLI commands based on arguments.

    Importance: Drives the local user experience without a UI.
    Alternatives: Invoke services via the HTTP API.
    """

    parser = build_parser()
    args = parser.parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    services = build_services(config)

    if args.command == "add":
        try:
            todo = services.todos.create_todo(
                args.title, category=args.category, priority=args.priority
            )
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        print(f"Added {_format_todo(todo)}")
        return

    if args.command == "list":
        todos = services.todos.list_todos(category=args.category, completed=args.completed)
        if not todos:
            print("No todos.")
            return
        for todo in todos:
            print(_format_todo(todo))
        return

    if args.command == "show":
        todo = services.todos.get_todo(args.todo_id)
        if todo is None:
            raise SystemExit(f"Todo {args.todo_id} not found.")
        print(_format_todo(todo))
        return

    if args.command == "update":
        try:
            todo = services.todos.update_todo(
                args.todo_id, title=args.title, category=args.category, priority=args.priority
            )
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        if todo is None:
            raise SystemExit(f"Todo {args.todo_id} not found.")
        print(f"Updated {_format_todo(todo)}")
        return

    if args.command == "complete":
        todo = services.todos.complete_todo(args.todo_id, completed=not args.undo)
        if todo is None:
            raise SystemExit(f"Todo {args.todo_id} not found.")
        print(f"Updated {_format_todo(todo)}")
        return

    if args.command == "delete":
        if not services.todos.delete_todo(args.todo_id):
            raise SystemExit(f"Todo {args.todo_id} not found.")
        print(f"Deleted todo {args.todo_id}.")
        return

    if args.command == "analyze":
        result = services.analysis.analyze(args.text)
        for key, value in result.as_dict().items():
            print(f"{key}: {value}")
        return

    if args.command == "suggest":
        print(services.suggestions.suggest())
        return

    if args.command == "stats":
        snapshot = services.stats.snapshot()
        for key, value in snapshot.items():
            if isinstance(value, dict):
                details = ", ".join(f"{name}={count}" for name, count in value.items())
                print(f"{key}: {details}")
            else:
                print(f"{key}: {value}")
        return

    if args.command == "add-user":
        user_id = services.users.create_user(args.username, args.password)
        print(f"Created user {user_id} ({args.username}).")
        return


if __name__ == "__main__":
    run_cli()
