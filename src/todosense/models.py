"""Summary: Domain model dataclasses for TodoSense.

Importance: Defines the entities shared across analysis, services, and storage.
Alternatives: Use Pydantic models or ORM classes directly.
"""

from __future__ import annotations

from dataclasses import dataclass

TODO_CATEGORIES: tuple[str, ...] = ("work", "personal", "shopping", "other")
PRIORITY_LEVELS: tuple[str, ...] = ("high", "medium", "low")

DEFAULT_CATEGORY = "other"
DEFAULT_PRIORITY = "medium"


@dataclass(frozen=True)
class Todo:
    """Summary: Represents a todo before it is persisted.

    Importance: Carries the title and derived attributes into storage.
    Alternatives: Pass raw dictionaries between services and storage.
    """

    title: str
    completed: bool = False
    category: str = "work"
    priority: str | None = DEFAULT_PRIORITY
    sentiment_score: int | None = 0


@dataclass(frozen=True)
class User:
    """Summary: Represents an account holder.

    Importance: Owns todos and provides a login identity.
    Alternatives: Keep a single implicit user without records.
    """

    username: str
    password: str


@dataclass(frozen=True)
class SentimentResult:
    """Summary: Lexicon polarity score with its qualitative bucket.

    Importance: Lets callers show a label while storing the raw score.
    Alternatives: Return only the numeric score.
    """

    score: int
    assessment: str


@dataclass(frozen=True)
class AnalysisResult:
    """Summary: Combined output of the text classification pipeline.

    Importance: Single value handed to the route layer for persistence.
    Alternatives: Call each classifier separately at every call site.
    """

    category: str
    priority: str
    sentiment: str
    sentiment_score: int

    def as_dict(self) -> dict[str, str | int]:
        return {
            "category": self.category,
            "priority": self.priority,
            "sentiment": self.sentiment,
            "sentiment_score": self.sentiment_score,
        }
