# feedback_portal/schemas/stats_schema.py
from pydantic import BaseModel
from typing import Dict

from feedback_portal.core.sentiment import SentimentLabel
from feedback_portal.core.statistics import SentimentStats as SentimentStatsValue

class SentimentStats(BaseModel):
    counts: Dict[SentimentLabel, int]
    total: int
    percentages: Dict[SentimentLabel, int]

    @classmethod
    def from_stats(cls, stats: SentimentStatsValue) -> "SentimentStats":
        return cls(**stats.as_dict())
