# tests for journal router - submit, list, and fetch entries
# emotion analysis is mocked by the autouse analyzer fixture

import pytest

from aceso.models.journal import EmotionAnalysis
from aceso.services.emotion_service import EmotionAnalysisError
from tests.conftest import HOPEFUL_ANALYSIS


class TestCreateJournalEntry:
    """submit new journal entries"""

    async def test_create_text_entry(self, client):
        resp = await client.post("/api/journal", json={
            "content": "Work has been piling up and I can't stop thinking about the deadline.",
            "inputMode": "text",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["id"]
        assert data["inputMode"] == "text"
        assert data["timestamp"]
        assert data["emotions"]["primaryEmotion"] == "anxious"
        assert data["emotions"]["secondaryEmotions"] == ["worried", "tired"]
        # negative base 2 + (-0.6 * 0.5)
        assert data["moodRating"] == 1.7

    async def test_create_voice_entry(self, client, analyzer):
        analyzer.return_value = EmotionAnalysis.model_validate(HOPEFUL_ANALYSIS)
        resp = await client.post("/api/journal", json={
            "content": "Transcribed: the session today really helped me.",
            "inputMode": "voice",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["inputMode"] == "voice"
        assert data["moodRating"] == 4.3

    async def test_create_entry_is_persisted(self, client, store):
        resp = await client.post("/api/journal", json={
            "content": "Short walk after dinner.",
            "inputMode": "text",
        })
        entry = await store.get(resp.json()["id"])
        assert entry is not None
        assert entry.content == "Short walk after dinner."

    async def test_analyzer_receives_content(self, client, analyzer):
        await client.post("/api/journal", json={"content": "Feeling lonely tonight.", "inputMode": "text"})
        analyzer.assert_awaited_once_with("Feeling lonely tonight.")

    async def test_analysis_failure_still_stores_entry(self, client, analyzer, store):
        analyzer.side_effect = EmotionAnalysisError("Failed to analyze emotions. Please try again.")
        resp = await client.post("/api/journal", json={
            "content": "The analyzer is down but this should still be saved.",
            "inputMode": "text",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["emotions"] is None
        assert data["moodRating"] is None
        assert len(await store.list()) == 1

    async def test_caller_cannot_set_emotions_or_mood(self, client):
        resp = await client.post("/api/journal", json={
            "content": "Trying to sneak in a mood rating.",
            "inputMode": "text",
            "moodRating": 5,
            "emotions": {"primaryEmotion": "joy"},
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["moodRating"] == 1.7
        assert data["emotions"]["primaryEmotion"] == "anxious"

    async def test_empty_content_rejected(self, client, store):
        resp = await client.post("/api/journal", json={"content": "", "inputMode": "text"})
        assert resp.status_code == 422
        assert await store.list() == []

    async def test_missing_content_rejected(self, client):
        resp = await client.post("/api/journal", json={"inputMode": "text"})
        assert resp.status_code == 422

    async def test_invalid_input_mode_rejected(self, client):
        resp = await client.post("/api/journal", json={"content": "Hello there.", "inputMode": "video"})
        assert resp.status_code == 422

    async def test_missing_input_mode_rejected(self, client, analyzer):
        resp = await client.post("/api/journal", json={"content": "Hello there."})
        assert resp.status_code == 422
        analyzer.assert_not_awaited()


class TestListJournalEntries:
    """list and fetch entries"""

    async def test_list_empty(self, client):
        resp = await client.get("/api/journal")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_list_newest_first(self, client, store, make_entry):
        older = make_entry(days_ago=3, content="older")
        newer = make_entry(days_ago=1, content="newer")
        store._entries[older.id] = older
        store._entries[newer.id] = newer

        resp = await client.get("/api/journal")
        data = resp.json()
        assert [e["content"] for e in data] == ["newer", "older"]

    async def test_list_uses_camel_case_fields(self, client):
        await client.post("/api/journal", json={"content": "Field names check.", "inputMode": "text"})
        resp = await client.get("/api/journal")
        entry = resp.json()[0]
        for field in ("id", "content", "inputMode", "timestamp", "emotions", "moodRating"):
            assert field in entry
        assert "sentimentScore" in entry["emotions"]

    async def test_get_entry(self, client):
        created = await client.post("/api/journal", json={"content": "Fetch me later.", "inputMode": "text"})
        entry_id = created.json()["id"]

        resp = await client.get(f"/api/journal/{entry_id}")
        assert resp.status_code == 200
        assert resp.json()["content"] == "Fetch me later."

    async def test_get_entry_not_found(self, client):
        resp = await client.get("/api/journal/does-not-exist")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Journal entry not found"
