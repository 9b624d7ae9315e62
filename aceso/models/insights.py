# insight models - derived mood statistics
# mirrors frontend shared/schema.ts MoodInsight

from typing import Literal
from pydantic import BaseModel, Field


class MoodInsight(BaseModel):
    """aggregate mood view, recomputed from the entry store on every read"""
    weekly_average: float = Field(0.0, alias="weeklyAverage")
    trend: Literal["improving", "declining", "stable"] = "stable"
    emotion_distribution: dict[str, int] = Field(default_factory=dict, alias="emotionDistribution")
    total_entries: int = Field(0, alias="totalEntries")
    streak_days: int = Field(0, alias="streakDays")

    model_config = {"populate_by_name": True}
