# feedback_portal/core/statistics.py
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping

from feedback_portal.core.sentiment import SentimentLabel


@dataclass(frozen=True)
class SentimentStats:
    """Label counts over a snapshot of feedback records"""
    counts: Mapping[SentimentLabel, int]
    total: int

    def __hash__(self) -> int:
        return hash((tuple(self.count(label) for label in SentimentLabel), self.total))

    def count(self, label: SentimentLabel) -> int:
        return self.counts.get(SentimentLabel(label), 0)

    def percentage(self, label: SentimentLabel) -> int:
        """
        Share of the label as a whole percentage, rounding halves up (12.5 -> 13).
        Returns 0 when there are no records.
        """
        if self.total == 0:
            return 0
        # round(count / total * 100) in integer arithmetic
        return (200 * self.count(label) + self.total) // (2 * self.total)

    def percentages(self) -> Dict[SentimentLabel, int]:
        return {label: self.percentage(label) for label in SentimentLabel}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "counts": {label.value: self.count(label) for label in SentimentLabel},
            "total": self.total,
            "percentages": {label.value: pct for label, pct in self.percentages().items()},
        }


def _label_of(record: Any) -> SentimentLabel:
    if isinstance(record, str):
        return SentimentLabel(record)
    if isinstance(record, Mapping):
        return SentimentLabel(record["sentiment"])
    return SentimentLabel(record.sentiment)


def aggregate(records: Iterable[Any]) -> SentimentStats:
    """
    Counts sentiment labels across feedback records.

    A record may be an ORM row or schema object with a ``sentiment`` attribute,
    a mapping with a ``sentiment`` key, or a bare label. Raises ValueError for a
    label outside Positive/Neutral/Negative.
    """
    tally = Counter(_label_of(record) for record in records)
    counts = {label: tally.get(label, 0) for label in SentimentLabel}
    return SentimentStats(counts=MappingProxyType(counts), total=sum(counts.values()))
