# emotion service - langchain-powered emotion analysis for journal entries
# asks an openai chat model for a json emotion breakdown, normalizes it,
# and derives the 1-5 mood rating from sentiment

import logging
from typing import Optional

from pydantic import ValidationError

from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.output_parsers import JsonOutputParser

from aceso.config import settings
from aceso.models.journal import EmotionAnalysis
from aceso.services.rounding import round_half_up

logger = logging.getLogger(__name__)

SENTIMENTS = ("positive", "negative", "neutral", "mixed")

SENTIMENT_TO_MOOD = {
    "positive": 4.0,
    "neutral": 3.0,
    "mixed": 2.5,
    "negative": 2.0,
}


class EmotionAnalysisError(Exception):
    """raised when the analyzer cannot produce an emotion breakdown"""


EMOTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are an expert in emotional intelligence and mental health. Analyze the following journal entry and identify:
1. The primary emotion (one word)
2. Secondary emotions (up to 3)
3. Overall sentiment (positive, negative, neutral, or mixed)
4. Sentiment score (-1 to 1, where -1 is very negative and 1 is very positive)
5. Confidence in your analysis (0 to 1)
6. Emotional intensity (0 to 1)
7. Key themes (up to 3)
8. A brief supportive summary (1-2 sentences)

Respond with JSON in this exact format:
{{
  "primaryEmotion": "string",
  "secondaryEmotions": ["string", "string"],
  "sentiment": "positive|negative|neutral|mixed",
  "sentimentScore": number,
  "confidence": number,
  "intensity": number,
  "themes": ["string", "string"],
  "summary": "string"
}}"""),
    ("human", "{text}"),
])

_chain = None


def get_llm() -> ChatOpenAI:
    """create an openai llm instance for emotion analysis"""
    return ChatOpenAI(
        model=settings.OPENAI_MODEL,
        api_key=settings.OPENAI_API_KEY,
    )


def get_emotion_chain():
    """get or create the emotion analysis chain"""
    global _chain
    if _chain is None:
        llm = get_llm().bind(response_format={"type": "json_object"})
        _chain = EMOTION_PROMPT | llm | JsonOutputParser()
    return _chain


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _to_float(value, default: float) -> float:
    """falsy or non-numeric values fall back to the default"""
    try:
        return float(value) if value else default
    except (TypeError, ValueError):
        return default


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v][:3]


def normalize_analysis(raw: dict) -> EmotionAnalysis:
    """fill defaults and clamp ranges on a raw model response"""
    sentiment = raw.get("sentiment")
    if sentiment not in SENTIMENTS:
        sentiment = "neutral"

    return EmotionAnalysis(
        primaryEmotion=raw.get("primaryEmotion") or "neutral",
        secondaryEmotions=_string_list(raw.get("secondaryEmotions")),
        sentiment=sentiment,
        sentimentScore=_clamp(_to_float(raw.get("sentimentScore"), 0.0), -1.0, 1.0),
        confidence=_clamp(_to_float(raw.get("confidence"), 0.7), 0.0, 1.0),
        intensity=_clamp(_to_float(raw.get("intensity"), 0.5), 0.0, 1.0),
        themes=_string_list(raw.get("themes")),
        summary=raw.get("summary") or "Your entry has been analyzed.",
    )


async def analyze_emotion(text: str) -> EmotionAnalysis:
    """run the emotion chain on journal text"""
    try:
        chain = get_emotion_chain()
        raw = await chain.ainvoke({"text": text})
    except Exception as e:
        logger.error(f"Emotion analysis failed: {e}")
        raise EmotionAnalysisError("Failed to analyze emotions. Please try again.") from e

    if not isinstance(raw, dict):
        logger.error(f"Emotion analysis returned non-object output: {type(raw).__name__}")
        raise EmotionAnalysisError("Failed to analyze emotions. Please try again.")

    try:
        return normalize_analysis(raw)
    except ValidationError as e:
        logger.error(f"Emotion analysis returned malformed fields: {e}")
        raise EmotionAnalysisError("Failed to analyze emotions. Please try again.") from e


def calculate_mood_rating(analysis: Optional[EmotionAnalysis]) -> Optional[float]:
    """map sentiment to a 1-5 mood, nudged by the sentiment score"""
    if analysis is None:
        return None
    base = SENTIMENT_TO_MOOD.get(analysis.sentiment, 3.0)
    mood = base + analysis.sentiment_score * 0.5
    return _clamp(round_half_up(mood), 1.0, 5.0)
