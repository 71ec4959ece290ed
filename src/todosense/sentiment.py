"""Summary: Lexicon-based sentiment scoring for todo text.

Importance: Gives each todo a mood signal without calling an external model.
Alternatives: Use NLTK VADER or a transformer sentiment model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from afinn import Afinn

from todosense.models import SentimentResult

_AFINN = Afinn(language="en")


def assess_score(score: int) -> str:
    """Summary: Bucket a polarity score into a qualitative label.

    Importance: Keeps thresholds in one place for API and UI consumers.
    Alternatives: Normalize scores by token count before bucketing.
    """

    if score > 2:
        return "very positive"
    if score > 0:
        return "positive"
    if score < -2:
        return "very negative"
    if score < 0:
        return "negative"
    return "neutral"


@dataclass(frozen=True)
class SentimentScorer:
    """Summary: Sums AFINN word weights over a text.

    Importance: Deterministic polarity for a fixed lexicon.
    Alternatives: Maintain a hand-written word list.
    """

    lexicon: Afinn = field(default=_AFINN, repr=False)

    def score(self, text: str) -> SentimentResult:
        """Summary: Score text and attach its assessment.

        Importance: Produces the integer stored alongside each todo.
        Alternatives: Store only the qualitative label.
        """

        if not isinstance(text, str) or not text.strip():
            return SentimentResult(score=0, assessment="neutral")
        score = int(round(self.lexicon.score(text)))
        return SentimentResult(score=score, assessment=assess_score(score))


_DEFAULT_SCORER = SentimentScorer()


def score_sentiment(text: str) -> SentimentResult:
    """Summary: Score text with the default AFINN lexicon.

    Importance: Convenience entry point for callers without a scorer instance.
    Alternatives: Construct SentimentScorer at each call site.
    """

    return _DEFAULT_SCORER.score(text)
