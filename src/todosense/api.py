"""Summary: FastAPI application for TodoSense.

Importance: Exposes todo CRUD, suggestions, and text analysis over HTTP.
Alternatives: Use a CLI-only workflow or a different web framework.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import Depends, FastAPI, Header, HTTPException, Response
from pydantic import BaseModel, Field

from todosense.app import build_services
from todosense.config import AppConfig

CategoryName = Literal["work", "personal", "shopping", "other"]
PriorityName = Literal["high", "medium", "low"]


class TodoCreateRequest(BaseModel):
    """Summary: Request payload for todo creation.

    Importance: Category and priority are optional and inferred when omitted.
    Alternatives: Require clients to classify todos themselves.
    """

    title: str = Field(min_length=1)
    completed: bool = False
    category: CategoryName | None = None
    priority: PriorityName | None = None


class TodoUpdateRequest(BaseModel):
    """Summary: Request payload for partial todo updates.

    Importance: Supports edits and completion toggles with one endpoint.
    Alternatives: Separate endpoints per field.
    """

    title: str | None = Field(default=None, min_length=1)
    completed: bool | None = None
    category: CategoryName | None = None
    priority: PriorityName | None = None


class AnalyzeRequest(BaseModel):
    """Summary: Request payload for text analysis."""

    text: str = ""


def create_app(config: AppConfig) -> FastAPI:
    """Summary: Create a FastAPI app wired to TodoSense services.

    Importance: Ensures the API layer shares the same configuration and storage.
    Alternatives: Instantiate services globally outside the factory.
    """

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
        )
    app = FastAPI(title="TodoSense API", version="0.1.0")
    services = build_services(config)

    def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
        """Summary: Enforce API key authentication when configured.

        Importance: Adds a minimal security layer for local and private deployments.
        Alternatives: Use OAuth or session-based authentication.
        """

        if not config.api_key:
            return
        if x_api_key != config.api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")

    @app.get("/health")
    def health() -> dict[str, str]:
        """Summary: Health check endpoint.

        Importance: Supports uptime checks in local and cloud deployments.
        Alternatives: Use a metrics endpoint only.
        """

        return {"status": "ok"}

    @app.get("/api/todos", dependencies=[Depends(require_api_key)])
    def list_todos(
        category: CategoryName | None = None, completed: bool | None = None
    ) -> list[dict[str, Any]]:
        """Summary: List todos newest first.

        Importance: Feeds the main list view and its filters.
        Alternatives: Paginate with cursors.
        """

        return [
            todo.as_dict()
            for todo in services.todos.list_todos(category=category, completed=completed)
        ]

    @app.get("/api/todos/{todo_id}", dependencies=[Depends(require_api_key)])
    def get_todo(todo_id: int) -> dict[str, Any]:
        todo = services.todos.get_todo(todo_id)
        if todo is None:
            raise HTTPException(status_code=404, detail="Todo not found")
        return todo.as_dict()

    @app.post("/api/todos", status_code=201, dependencies=[Depends(require_api_key)])
    def create_todo(payload: TodoCreateRequest) -> dict[str, Any]:
        """Summary: Create a todo with inferred attributes.

        Importance: Every stored todo carries a category, priority, and sentiment score.
        Alternatives: Annotate todos asynchronously after creation.
        """

        try:
            todo = services.todos.create_todo(
                payload.title,
                completed=payload.completed,
                category=payload.category,
                priority=payload.priority,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return todo.as_dict()

    @app.put("/api/todos/{todo_id}", dependencies=[Depends(require_api_key)])
    def update_todo(todo_id: int, payload: TodoUpdateRequest) -> dict[str, Any]:
        """Summary: Update a todo, re-annotating when the title changes.

        Importance: Keeps derived attributes consistent with edited titles.
        Alternatives: Only allow completion toggles.
        """

        try:
            todo = services.todos.update_todo(
                todo_id,
                title=payload.title,
                completed=payload.completed,
                category=payload.category,
                priority=payload.priority,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        if todo is None:
            raise HTTPException(status_code=404, detail="Todo not found")
        return todo.as_dict()

    @app.delete(
        "/api/todos/{todo_id}",
        status_code=204,
        response_class=Response,
        dependencies=[Depends(require_api_key)],
    )
    def delete_todo(todo_id: int) -> Response:
        if not services.todos.delete_todo(todo_id):
            raise HTTPException(status_code=404, detail="Todo not found")
        return Response(status_code=204)

    @app.get("/api/suggestions", dependencies=[Depends(require_api_key)])
    def suggestions() -> dict[str, str]:
        """Summary: Suggest a follow-up task from the current list.

        Importance: Repeated calls may return different generic suggestions.
        Alternatives: Return the full suggestion pool at once.
        """

        return {"suggestion": services.suggestions.suggest()}

    @app.post("/api/analyze", dependencies=[Depends(require_api_key)])
    def analyze(payload: AnalyzeRequest) -> dict[str, Any]:
        """Summary: Analyze text without creating a todo.

        Importance: Lets clients preview inferred attributes while typing.
        Alternatives: Analyze only on todo creation.
        """

        if not payload.text:
            raise HTTPException(status_code=400, detail="Text is required")
        return services.analysis.analyze(payload.text).as_dict()

    @app.get("/api/stats", dependencies=[Depends(require_api_key)])
    def stats() -> dict[str, Any]:
        """Summary: Return todo counts.

        Importance: Provides lightweight analytics for dashboards.
        Alternatives: Build a separate analytics service.
        """

        return services.stats.snapshot()

    return app


app = create_app(AppConfig.from_env())
