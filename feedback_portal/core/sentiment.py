# feedback_portal/core/sentiment.py
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from feedback_portal.core.lexicon import Lexicon, default_lexicon

logger = logging.getLogger(__name__)

# Words are runs of letters/digits; inner apostrophes and hyphens stay in the word.
TOKEN_PATTERN = re.compile(r"[^\W_]+(?:['\-][^\W_]+)*")


class SentimentLabel(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SentimentResult:
    """Result of lexicon scoring for a single text"""
    label: SentimentLabel
    score: int  # sum of the weights of all matched tokens
    comparative: float  # score divided by the number of tokens
    positive: List[str] = field(default_factory=list)  # matched words with a positive weight
    negative: List[str] = field(default_factory=list)  # matched words with a negative weight


def tokenize(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text.lower())


def label_for_score(score: int) -> SentimentLabel:
    if score > 0:
        return SentimentLabel.POSITIVE
    if score < 0:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


class SentimentClassifier:
    """Lexicon-based sentiment classifier.

    Every token of the text is looked up in the lexicon (unknown tokens weigh 0)
    and the weights are summed. A positive sum is Positive, a negative sum is
    Negative, anything else is Neutral.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()

    def score(self, text: str) -> int:
        return sum(self.lexicon.get(token, 0) for token in tokenize(text))

    def classify(self, text: str) -> SentimentLabel:
        return label_for_score(self.score(text))

    def analyze(self, text: str) -> SentimentResult:
        """
        Scores the text and reports which words contributed to the score.
        """
        tokens = tokenize(text)
        score = 0
        positive, negative = [], []
        for token in tokens:
            weight = self.lexicon.get(token, 0)
            if weight > 0:
                positive.append(token)
            elif weight < 0:
                negative.append(token)
            score += weight

        return SentimentResult(
            label=label_for_score(score),
            score=score,
            comparative=score / len(tokens) if tokens else 0.0,
            positive=positive,
            negative=negative,
        )


_default_classifier: Optional[SentimentClassifier] = None


def get_default_classifier() -> SentimentClassifier:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = SentimentClassifier()
    return _default_classifier


def classify(text: str) -> SentimentLabel:
    """Classifies text with the default lexicon."""
    return get_default_classifier().classify(text)


def sentiment_color(sentiment: Union[SentimentLabel, str]) -> str:
    """Badge tone used by dashboards to render a label."""
    if sentiment == SentimentLabel.POSITIVE:
        return "success"
    if sentiment == SentimentLabel.NEGATIVE:
        return "destructive"
    if sentiment == SentimentLabel.NEUTRAL:
        return "neutral"
    return "muted"
