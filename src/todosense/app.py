"""Summary: Application factory wiring core services.

Importance: Centralizes dependency creation for the CLI and API layers.
Alternatives: Instantiate services manually in each entrypoint.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from todosense.analysis import TextAnalyzer
from todosense.classifier import RuleBasedClassifier
from todosense.config import AppConfig
from todosense.services import (
    AnalysisService,
    StatsService,
    SuggestionService,
    TodoService,
    UserService,
)
from todosense.sentiment import SentimentScorer
from todosense.storage.sqlite_store import SqliteStore
from todosense.suggestions import SuggestionGenerator


@dataclass(frozen=True)
class AppContext:
    """Summary: Shared application context for building user services.

    Importance: Reuses storage and the text analyzer across user-bound services.
    Alternatives: Rebuild dependencies for every request.
    """

    store: SqliteStore
    analyzer: TextAnalyzer
    config: AppConfig

    def services_for_user(self, user_id: int) -> "AppServices":
        """Summary: Build user-scoped services from shared context.

        Importance: Keeps each user's todos behind their own service instances.
        Alternatives: Use a multi-tenant database with row-level security.
        """

        return AppServices(
            todos=TodoService(store=self.store, analyzer=self.analyzer, user_id=user_id),
            suggestions=SuggestionService(
                store=self.store, analyzer=self.analyzer, user_id=user_id
            ),
            analysis=AnalysisService(analyzer=self.analyzer),
            users=UserService(store=self.store, token_secret=self.config.token_secret),
            stats=StatsService(store=self.store, user_id=user_id),
            store=self.store,
            user_id=user_id,
        )


@dataclass(frozen=True)
class AppServices:
    """Summary: Bundle of core services for TodoSense.

    Importance: Simplifies passing dependencies to UI or API layers.
    Alternatives: Use a dependency injection container.
    """

    todos: TodoService
    suggestions: SuggestionService
    analysis: AnalysisService
    users: UserService
    stats: StatsService
    store: SqliteStore
    user_id: int


def build_analyzer(config: AppConfig) -> TextAnalyzer:
    """Summary: Build the text analyzer, seeding suggestions when configured.

    Importance: A fixed seed makes the suggestion fallback reproducible.
    Alternatives: Always use an unseeded random source.
    """

    classifier = RuleBasedClassifier()
    rng = random.Random(config.suggestion_seed)
    return TextAnalyzer(
        classifier=classifier,
        scorer=SentimentScorer(),
        suggestions=SuggestionGenerator(classifier=classifier, rng=rng),
    )


def build_context(config: AppConfig) -> AppContext:
    """Summary: Build shared context for user-scoped services.

    Importance: Reuses storage and heuristics across user sessions.
    Alternatives: Construct dependencies separately per request.
    """

    store = SqliteStore(config.db_path)
    store.initialize()
    return AppContext(store=store, analyzer=build_analyzer(config), config=config)


def build_services(config: AppConfig) -> AppServices:
    """Summary: Build core services from configuration.

    Importance: Provides a single construction path for the application.
    Alternatives: Instantiate services directly within the CLI entrypoint.
    """

    context = build_context(config)
    user_id = context.store.ensure_user(config.default_user_name)
    return context.services_for_user(user_id)
