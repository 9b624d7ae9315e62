# shared fixtures for backend api tests
# provides fresh entry stores, entry builders, a mocked emotion analyzer, and httpx test client

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock, patch
from datetime import datetime, timedelta, timezone
from bson import ObjectId

from httpx import AsyncClient, ASGITransport

from aceso.main import app
from aceso.dependencies import get_entry_store
from aceso.models.journal import EmotionAnalysis, JournalEntry
from aceso.services.entry_store import InMemoryEntryStore


# sample data

ANXIOUS_ANALYSIS = {
    "primaryEmotion": "anxious",
    "secondaryEmotions": ["worried", "tired"],
    "sentiment": "negative",
    "sentimentScore": -0.6,
    "confidence": 0.9,
    "intensity": 0.7,
    "themes": ["work", "deadlines"],
    "summary": "You are carrying a lot of pressure from work right now.",
}

HOPEFUL_ANALYSIS = {
    "primaryEmotion": "hopeful",
    "secondaryEmotions": ["calm"],
    "sentiment": "positive",
    "sentimentScore": 0.6,
    "confidence": 0.85,
    "intensity": 0.5,
    "themes": ["therapy"],
    "summary": "Your session left you feeling steadier.",
}


# async cursor mock

class AsyncCursorMock:
    """mock for motor's async cursor - supports async for and chained methods"""

    def __init__(self, data=None):
        self._data = list(data or [])
        self._index = 0

    def sort(self, key, direction=1):
        self._data = sorted(self._data, key=lambda d: d[key], reverse=direction == -1)
        return self

    def limit(self, n):
        self._data = self._data[:n]
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item


class MockCollection:
    """mock for a motor collection with async methods"""

    def __init__(self, data=None):
        self._data = data or []
        self.inserted = []
        self.indexes = []

    def find(self, query=None, projection=None):
        results = self._data
        if query:
            results = [d for d in results if self._matches(d, query)]
        return AsyncCursorMock(results)

    async def find_one(self, query=None, projection=None):
        if not query:
            return self._data[0] if self._data else None
        for doc in self._data:
            if self._matches(doc, query):
                return doc
        return None

    async def insert_one(self, doc):
        oid = doc.get("_id", ObjectId())
        doc["_id"] = oid
        self._data.append(doc)
        self.inserted.append(doc)
        result = MagicMock()
        result.inserted_id = oid
        return result

    async def create_index(self, key, **kwargs):
        self.indexes.append((key, kwargs))
        return f"{key}_1"

    def _matches(self, doc, query):
        return all(doc.get(key) == value for key, value in query.items())


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self):
        self.journal_entries = MockCollection([])
        self.connected = False

    async def connect(self):
        self.connected = True

    async def close(self):
        self.connected = False


# entry builders

def build_entry(
    days_ago: float = 0,
    mood: float | None = None,
    emotions: dict | None = None,
    now: datetime | None = None,
    content: str = "Writing a few thoughts down.",
    input_mode: str = "text",
) -> JournalEntry:
    """journal entry with a timestamp relative to now"""
    now = now or datetime.now(timezone.utc)
    return JournalEntry(
        id=str(ObjectId()),
        content=content,
        inputMode=input_mode,
        timestamp=now - timedelta(days=days_ago),
        emotions=EmotionAnalysis.model_validate(emotions) if emotions else None,
        moodRating=mood,
    )


@pytest.fixture
def make_entry():
    return build_entry


@pytest.fixture
def local_noon():
    """today at noon in the local timezone, keeps day arithmetic clear of midnight"""
    return datetime.now().astimezone().replace(hour=12, minute=0, second=0, microsecond=0)


@pytest.fixture
def store():
    """create a fresh in-memory store for each test"""
    return InMemoryEntryStore()


@pytest.fixture
def mock_db():
    return MockDatabase()


@pytest.fixture(autouse=True)
def analyzer():
    """emotion analyzer mock so no test reaches openai"""
    with patch(
        "aceso.routers.journal.analyze_emotion",
        new_callable=AsyncMock,
        return_value=EmotionAnalysis.model_validate(ANXIOUS_ANALYSIS),
    ) as mock_analyze:
        yield mock_analyze


@pytest_asyncio.fixture
async def client(store):
    """httpx async test client with the entry store overridden"""

    async def override_get_entry_store():
        return store

    app.dependency_overrides[get_entry_store] = override_get_entry_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
