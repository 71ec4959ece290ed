"""Summary: Tests for category and priority classification.

Importance: Validates keyword scoring, tie-breaking, and defaults.
Alternatives: Use only AI-driven classification without rules.
"""

from __future__ import annotations

import pytest

from todosense.classifier import (
    DEFAULT_LEXICON,
    KeywordLexicon,
    RuleBasedClassifier,
    classify_category,
    classify_priority,
)
from todosense.models import PRIORITY_LEVELS, TODO_CATEGORIES


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Prepare presentation for client meeting", "work"),
        ("Doctor appointment", "personal"),
        ("Buy new shoes", "shopping"),
        ("Buy groceries", "shopping"),
        ("Write quarterly reports", "work"),
        ("xyzzy plugh", "other"),
    ],
)
def test_classify_category(text: str, expected: str) -> None:
    """Summary: Verify keyword matches pick the expected category.

    Importance: Confirms deterministic classification for basic workflows.
    Alternatives: Skip suggestions until AI integration is active.
    """

    assert classify_category(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "!!!"])
def test_classify_category_empty_returns_other(text: str) -> None:
    """Summary: Verify text without tokens falls back to other."""

    assert classify_category(text) == "other"


def test_category_tie_prefers_declaration_order() -> None:
    """Summary: Verify equal scores resolve to the earlier category.

    Importance: Guarantees stable output regardless of word order.
    Alternatives: Break ties alphabetically or randomly.
    """

    assert classify_category("meeting doctor") == "work"
    assert classify_category("doctor meeting") == "work"
    assert classify_category("order doctor") == "personal"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("remind us", "other"),
        ("as", "shopping"),
        ("let's shop", "shopping"),
    ],
)
def test_category_short_tokens_match_on_surface_form(text: str, expected: str) -> None:
    """Summary: Verify short words and contraction fragments are not over-stemmed.

    Importance: A stem like "u" or "" would match keywords such as "colleague".
    Alternatives: Drop short tokens before scoring.
    """

    assert classify_category(text) == expected


def test_category_is_idempotent() -> None:
    """Summary: Verify repeated calls return the same category."""

    text = "Email the boss about the project"
    assert classify_category(text) == classify_category(text)


def test_category_with_empty_lexicon_returns_other() -> None:
    """Summary: Verify an empty lexicon yields the default instead of failing.

    Importance: Misconfigured keyword tables must not crash requests.
    Alternatives: Validate lexicons at startup and refuse to run.
    """

    lexicon = KeywordLexicon(
        categories=(("work", ("",)), ("personal", ()), ("shopping", ()), ("other", ())),
        high=(),
        medium=(),
        low=(),
    )
    classifier = RuleBasedClassifier(lexicon=lexicon)
    assert classifier.suggest_category("Prepare the report") == "other"
    assert classifier.suggest_priority("urgent") == "medium"


def test_category_always_in_enumeration() -> None:
    """Summary: Verify results stay within the closed category set."""

    for text in ["", "call mom", "buy a cart online", "emergency!!", "123 456"]:
        assert classify_category(text) in TODO_CATEGORIES


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("this is urgent, need it today", "high"),
        ("Call the client tomorrow", "high"),
        ("maybe sometime later", "low"),
        ("Consider a new hobby", "low"),
        ("buy milk", "medium"),
        ("", "medium"),
    ],
)
def test_classify_priority(text: str, expected: str) -> None:
    """Summary: Verify urgency and deferral phrases map to priorities.

    Importance: Surfaces time-sensitive todos automatically.
    Alternatives: Require manual priority on every todo.
    """

    assert classify_priority(text) == expected


def test_priority_high_wins_over_low() -> None:
    """Summary: Verify high phrases are checked before low phrases."""

    assert classify_priority("maybe finish it today") == "high"


def test_priority_ignores_medium_phrases() -> None:
    """Summary: Verify medium phrases do not change the default.

    Importance: Medium is reached by absence of high and low evidence only.
    Alternatives: Score medium phrases explicitly.
    """

    assert "next week" in DEFAULT_LEXICON.medium
    assert classify_priority("review the report next week") == "medium"


def test_priority_always_in_enumeration() -> None:
    """Summary: Verify results stay within the closed priority set."""

    for text in ["", "ASAP", "if time permits", "hello"]:
        assert classify_priority(text) in PRIORITY_LEVELS
