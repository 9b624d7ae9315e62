# journal router - submit, list, and fetch journal entries
# submission runs emotion analysis before the entry is stored

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from aceso.models.journal import JournalCreate, JournalEntry
from aceso.services.entry_store import EntryStore
from aceso.services.emotion_service import analyze_emotion, calculate_mood_rating, EmotionAnalysisError
from aceso.dependencies import get_entry_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/journal", tags=["journal"])


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def create_journal_entry(
    body: JournalCreate,
    store: EntryStore = Depends(get_entry_store),
):
    """analyze and store a new journal entry"""

    # a failed analysis still stores the entry, without emotions or mood
    emotions = None
    try:
        emotions = await analyze_emotion(body.content)
    except EmotionAnalysisError as e:
        logger.warning(f"Storing entry without emotion analysis: {e}")

    entry = await store.create(
        body,
        emotions=emotions,
        mood_rating=calculate_mood_rating(emotions),
    )

    logger.info(f"Journal entry created: {entry.id} ({entry.input_mode})")
    return entry


@router.get("", response_model=list[JournalEntry])
async def list_journal_entries(store: EntryStore = Depends(get_entry_store)):
    """all entries, newest first"""
    return await store.list()


@router.get("/{entry_id}", response_model=JournalEntry)
async def get_journal_entry(
    entry_id: str,
    store: EntryStore = Depends(get_entry_store),
):
    entry = await store.get(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal entry not found",
        )
    return entry
