# journal models - entry creation, emotion analysis, and stored entry schemas
# mirrors frontend shared/schema.ts JournalEntry, EmotionAnalysis

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, Field

from aceso.config import settings


class JournalCreate(BaseModel):
    """payload for journal submission. emotions and mood are set by the analyzer, not the caller"""
    content: str = Field(..., min_length=1, max_length=settings.JOURNAL_MAX_LENGTH, description="journal entry text")
    input_mode: Literal["text", "voice"] = Field(..., alias="inputMode", description="how the entry was captured")

    model_config = {"populate_by_name": True}


class EmotionAnalysis(BaseModel):
    """ai-derived emotion breakdown attached to a single entry"""
    primary_emotion: str = Field(..., alias="primaryEmotion")
    secondary_emotions: list[str] = Field(default_factory=list, alias="secondaryEmotions", max_length=3)
    sentiment: Literal["positive", "negative", "neutral", "mixed"]
    sentiment_score: float = Field(..., alias="sentimentScore", ge=-1, le=1)
    confidence: float = Field(..., ge=0, le=1)
    intensity: float = Field(..., ge=0, le=1)
    themes: list[str] = Field(default_factory=list, max_length=3)
    summary: str = ""

    model_config = {"populate_by_name": True, "frozen": True}


class JournalEntry(BaseModel):
    """persisted journal entry, immutable once created"""
    id: str
    content: str
    input_mode: Literal["text", "voice"] = Field(..., alias="inputMode")
    timestamp: datetime
    emotions: Optional[EmotionAnalysis] = None
    mood_rating: Optional[float] = Field(None, alias="moodRating", ge=1, le=5)

    model_config = {"populate_by_name": True, "frozen": True}
