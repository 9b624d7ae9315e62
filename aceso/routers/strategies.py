# strategies router - coping strategy catalog, personalized by emotion labels

from fastapi import APIRouter, Query

from aceso.models.strategy import CopingStrategy
from aceso.services.strategies import recommend_strategies, parse_emotion_labels

router = APIRouter(prefix="/api/strategies", tags=["strategies"])


@router.get("", response_model=list[CopingStrategy], response_model_exclude_none=True)
async def list_strategies(
    emotions: str = Query(None, description="comma-separated emotion labels, e.g. anxious,tired"),
):
    """full catalog. strategies matching the given emotions come first with a reason"""
    return recommend_strategies(parse_emotion_labels(emotions))
