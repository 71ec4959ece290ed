"""Summary: Category and priority classification helpers.

Importance: Provides lightweight, explainable labels for every todo.
Alternatives: Use an LLM-based classifier for higher accuracy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from todosense.models import DEFAULT_CATEGORY, DEFAULT_PRIORITY, TODO_CATEGORIES
from todosense.text import Token, analyze_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordLexicon:
    """Summary: Read-only keyword tables for categories and priorities.

    Importance: Keeps classification data separate from the matching rules.
    Alternatives: Load keyword lists from a JSON file at startup.
    """

    categories: tuple[tuple[str, tuple[str, ...]], ...]
    high: tuple[str, ...]
    medium: tuple[str, ...]
    low: tuple[str, ...]

    def keywords_for(self, category: str) -> tuple[str, ...]:
        for name, keywords in self.categories:
            if name == category:
                return keywords
        return ()


DEFAULT_LEXICON = KeywordLexicon(
    categories=(
        (
            "work",
            (
                "meeting",
                "project",
                "deadline",
                "report",
                "client",
                "presentation",
                "email",
                "call",
                "boss",
                "colleague",
            ),
        ),
        (
            "personal",
            (
                "health",
                "exercise",
                "family",
                "friend",
                "hobby",
                "home",
                "self",
                "life",
                "doctor",
                "appointment",
            ),
        ),
        (
            "shopping",
            (
                "buy",
                "purchase",
                "shop",
                "store",
                "grocery",
                "item",
                "list",
                "cart",
                "online",
                "order",
                "deliver",
            ),
        ),
        ("other", ()),
    ),
    high=(
        "urgent",
        "important",
        "critical",
        "asap",
        "deadline",
        "tomorrow",
        "today",
        "soon",
        "immediately",
        "emergency",
    ),
    # Not consulted by suggest_priority; anything without high/low evidence is medium.
    medium=("next week", "this week", "soon", "follow up", "check", "review"),
    low=("sometime", "when possible", "eventually", "later", "consider", "maybe", "if time"),
)


@dataclass(frozen=True)
class RuleBasedClassifier:
    """Summary: Keyword-based category and priority classifier.

    Importance: Offers deterministic, fast labels without an AI service.
    Alternatives: Use a supervised ML classifier or LLM-based categorizer.
    """

    lexicon: KeywordLexicon = field(default=DEFAULT_LEXICON)

    def suggest_category(self, text: str) -> str:
        """Summary: Pick the category whose keywords best match the text.

        Importance: Auto-tags todos so lists can be filtered by area of life.
        Alternatives: Require manual category selection on every todo.
        """

        tokens = analyze_tokens(text)
        if not tokens:
            return DEFAULT_CATEGORY

        scores = {category: 0 for category in TODO_CATEGORIES}
        for token in tokens:
            for category in TODO_CATEGORIES:
                keywords = self.lexicon.keywords_for(category)
                if any(_matches(token, keyword) for keyword in keywords):
                    scores[category] += 1

        best_category = DEFAULT_CATEGORY
        best_score = 0
        for category in TODO_CATEGORIES:
            if scores[category] > best_score:
                best_score = scores[category]
                best_category = category
        logger.debug("Category scores %s for %r.", scores, text)
        return best_category if best_score > 0 else DEFAULT_CATEGORY

    def suggest_priority(self, text: str) -> str:
        """Summary: Infer urgency from keyword phrases in the text.

        Importance: Surfaces time-sensitive todos without user input.
        Alternatives: Parse due dates and rank by time remaining.
        """

        if not isinstance(text, str) or not text:
            return DEFAULT_PRIORITY
        lowered = text.lower()
        for keyword in self.lexicon.high:
            if keyword in lowered:
                return "high"
        for keyword in self.lexicon.low:
            if keyword in lowered:
                return "low"
        return DEFAULT_PRIORITY


def _matches(token: Token, keyword: str) -> bool:
    """Summary: Loose bidirectional substring match on word and stem.

    Importance: Tolerates partial words and inflections without a full lemmatizer.
    Alternatives: Exact matching against stemmed keywords.
    """

    if not keyword:
        return False
    return (
        keyword in token.word
        or token.word in keyword
        or keyword in token.stem
        or token.stem in keyword
    )


_DEFAULT_CLASSIFIER = RuleBasedClassifier()


def classify_category(text: str) -> str:
    """Summary: Classify text with the default lexicon.

    Importance: Convenience entry point for callers without a classifier instance.
    Alternatives: Construct RuleBasedClassifier at each call site.
    """

    return _DEFAULT_CLASSIFIER.suggest_category(text)


def classify_priority(text: str) -> str:
    """Summary: Classify urgency with the default lexicon.

    Importance: Convenience entry point mirroring classify_category.
    Alternatives: Construct RuleBasedClassifier at each call site.
    """

    return _DEFAULT_CLASSIFIER.suggest_priority(text)
