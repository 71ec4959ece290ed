"""Summary: Follow-up task suggestions based on existing todos.

Importance: Nudges users toward tasks their list is missing.
Alternatives: Ask an LLM for suggestions from the full todo history.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from todosense.classifier import RuleBasedClassifier

ONBOARDING_SUGGESTION = "Add your first task!"
WORK_FOLLOW_UP_SUGGESTION = "Follow up on previous work tasks"
EXERCISE_SUGGESTION = "Schedule exercise time"
GROCERY_SUGGESTION = "Create grocery shopping list"

GENERIC_SUGGESTIONS: tuple[str, ...] = (
    "Plan your next week's tasks",
    "Set a reminder for upcoming deadlines",
    "Check in with team members",
    "Review your goals for this month",
    "Organize your workspace",
)

# (category, phrase that already covers the gap, suggestion), checked in order.
_GAP_RULES: tuple[tuple[str, str, str], ...] = (
    ("work", "follow up", WORK_FOLLOW_UP_SUGGESTION),
    ("personal", "exercise", EXERCISE_SUGGESTION),
    ("shopping", "grocery", GROCERY_SUGGESTION),
)


@dataclass(frozen=True)
class SuggestionGenerator:
    """Summary: Derives one follow-up suggestion from todo titles.

    Importance: Powers the "get another suggestion" flow in clients.
    Alternatives: Return a fixed list of tips.
    """

    classifier: RuleBasedClassifier = field(default_factory=RuleBasedClassifier)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def suggest(self, existing_titles: Sequence[str]) -> str:
        """Summary: Suggest a task that fills a category gap.

        Importance: Rule-based gaps are deterministic; the generic fallback is
        random so repeated calls can surface different ideas.
        Alternatives: Rotate the fallback pool in a fixed order.
        """

        if not existing_titles:
            return ONBOARDING_SUGGESTION

        present = {self.classifier.suggest_category(title) for title in existing_titles}
        for category, phrase, suggestion in _GAP_RULES:
            if category in present and not any(phrase in title for title in existing_titles):
                return suggestion
        return self.rng.choice(GENERIC_SUGGESTIONS)


def suggest_follow_up(existing_titles: Sequence[str], rng: random.Random | None = None) -> str:
    """Summary: Suggest a follow-up task with an optional random source.

    Importance: Lets tests fix a seed while production uses fresh randomness.
    Alternatives: Construct SuggestionGenerator at each call site.
    """

    generator = SuggestionGenerator(rng=rng if rng is not None else random.Random())
    return generator.suggest(existing_titles)
