# insights router - mood insight recomputed from the entry store on each read

from fastapi import APIRouter, Depends

from aceso.models.insights import MoodInsight
from aceso.services.entry_store import EntryStore
from aceso.services.insights import compute_mood_insight
from aceso.dependencies import get_entry_store

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("", response_model=MoodInsight)
async def get_mood_insights(store: EntryStore = Depends(get_entry_store)):
    """weekly average, trend, emotion distribution, and streak for all entries"""
    entries = await store.list()
    return compute_mood_insight(entries)
