"""Summary: Combined text analysis pipeline.

Importance: Produces every derived todo attribute from one call.
Alternatives: Call each classifier separately in the route layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from todosense.classifier import RuleBasedClassifier
from todosense.models import AnalysisResult
from todosense.sentiment import SentimentScorer
from todosense.suggestions import SuggestionGenerator


@dataclass(frozen=True)
class TextAnalyzer:
    """Summary: Bundles classifier, sentiment scorer, and suggestion generator.

    Importance: Gives services one injectable collaborator for all heuristics.
    Alternatives: Inject each component into services individually.
    """

    classifier: RuleBasedClassifier = field(default_factory=RuleBasedClassifier)
    scorer: SentimentScorer = field(default_factory=SentimentScorer)
    suggestions: SuggestionGenerator = field(default_factory=SuggestionGenerator)

    def analyze(self, text: str) -> AnalysisResult:
        """Summary: Derive category, priority, and sentiment for text.

        Importance: Backs the analyze endpoint and todo annotation.
        Alternatives: Compute attributes lazily when todos are displayed.
        """

        sentiment = self.scorer.score(text)
        return AnalysisResult(
            category=self.classifier.suggest_category(text),
            priority=self.classifier.suggest_priority(text),
            sentiment=sentiment.assessment,
            sentiment_score=sentiment.score,
        )

    def suggest(self, existing_titles: Sequence[str]) -> str:
        return self.suggestions.suggest(existing_titles)


def analyze_text(text: str) -> AnalysisResult:
    """Summary: Analyze text with default components.

    Importance: Convenience entry point for scripts and tests.
    Alternatives: Construct TextAnalyzer at each call site.
    """

    return TextAnalyzer().analyze(text)
