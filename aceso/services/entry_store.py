# entry store - append-only journal entry persistence
# one capability interface with an in-memory backing and a mongodb backing.
# the store is built once in the app lifespan and injected into handlers.

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from aceso.models.journal import JournalCreate, JournalEntry, EmotionAnalysis
from aceso.services.db import Database

logger = logging.getLogger(__name__)


class EntryStore(ABC):
    """create / list / get contract shared by all entry store backings.

    entries are immutable once created. list() returns a snapshot ordered by
    timestamp descending, so one aggregation pass sees a consistent collection.
    """

    async def connect(self):
        pass

    async def close(self):
        pass

    @abstractmethod
    async def create(
        self,
        data: JournalCreate,
        emotions: Optional[EmotionAnalysis] = None,
        mood_rating: Optional[float] = None,
    ) -> JournalEntry:
        """persist a new entry with a generated id and server-assigned timestamp"""

    @abstractmethod
    async def list(self) -> list[JournalEntry]:
        """all entries, newest first"""

    @abstractmethod
    async def get(self, entry_id: str) -> Optional[JournalEntry]:
        """a single entry or None"""


def _new_entry(
    data: JournalCreate,
    emotions: Optional[EmotionAnalysis],
    mood_rating: Optional[float],
) -> JournalEntry:
    return JournalEntry(
        id=str(uuid.uuid4()),
        content=data.content,
        inputMode=data.input_mode,
        timestamp=datetime.now(timezone.utc),
        emotions=emotions,
        moodRating=mood_rating,
    )


class InMemoryEntryStore(EntryStore):
    """dict-backed store, the default for local development and tests"""

    def __init__(self):
        self._entries: dict[str, JournalEntry] = {}

    async def create(self, data, emotions=None, mood_rating=None) -> JournalEntry:
        # the entry is fully built before it becomes visible to readers
        entry = _new_entry(data, emotions, mood_rating)
        self._entries[entry.id] = entry
        logger.info(f"Journal entry stored in memory: {entry.id}")
        return entry

    async def list(self) -> list[JournalEntry]:
        return sorted(self._entries.values(), key=lambda e: e.timestamp, reverse=True)

    async def get(self, entry_id: str) -> Optional[JournalEntry]:
        return self._entries.get(entry_id)


def _entry_to_doc(entry: JournalEntry) -> dict:
    """convert an entry to a mongodb document (snake_case fields)"""
    return {
        "entry_id": entry.id,
        "content": entry.content,
        "input_mode": entry.input_mode,
        "timestamp": entry.timestamp,
        "emotions": entry.emotions.model_dump() if entry.emotions else None,
        "mood_rating": entry.mood_rating,
    }


def _doc_to_entry(doc: dict) -> JournalEntry:
    """convert a mongodb journal_entries document to the entry model"""
    timestamp = doc["timestamp"]
    # documents written without tz_aware come back naive, they are always utc
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    raw_emotions = doc.get("emotions")
    emotions = EmotionAnalysis.model_validate(raw_emotions) if raw_emotions else None

    return JournalEntry(
        id=doc["entry_id"],
        content=doc.get("content", ""),
        inputMode=doc.get("input_mode", "text"),
        timestamp=timestamp,
        emotions=emotions,
        moodRating=doc.get("mood_rating"),
    )


class MongoEntryStore(EntryStore):
    """store backed by the journal_entries collection"""

    def __init__(self, db: Optional[Database] = None):
        self.db = db or Database()

    async def connect(self):
        await self.db.connect()
        await self.db.journal_entries.create_index("entry_id", unique=True)
        await self.db.journal_entries.create_index("timestamp")

    async def close(self):
        await self.db.close()

    async def create(self, data, emotions=None, mood_rating=None) -> JournalEntry:
        entry = _new_entry(data, emotions, mood_rating)
        # single-document insert is atomic for concurrent readers
        await self.db.journal_entries.insert_one(_entry_to_doc(entry))
        logger.info(f"Journal entry stored in MongoDB: {entry.id}")
        return entry

    async def list(self) -> list[JournalEntry]:
        cursor = self.db.journal_entries.find({}).sort("timestamp", -1)
        entries = []
        async for doc in cursor:
            entries.append(_doc_to_entry(doc))
        return entries

    async def get(self, entry_id: str) -> Optional[JournalEntry]:
        doc = await self.db.journal_entries.find_one({"entry_id": entry_id})
        if not doc:
            return None
        return _doc_to_entry(doc)


def create_entry_store(backend: str) -> EntryStore:
    """build the configured store backing ("memory" or "mongodb")"""
    backend = backend.strip().lower()
    if backend == "memory":
        return InMemoryEntryStore()
    if backend == "mongodb":
        return MongoEntryStore()
    raise ValueError(f"Unknown storage backend: {backend}")
