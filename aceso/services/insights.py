# insight aggregator - mood statistics derived from the full entry collection
# pure functions, no i/o. recomputed on every /api/insights read.
#
# weekly average: mean mood over the last 7 days (missing mood counts as 0)
# trend: current 7-day window vs the 7 days before it, +/- 0.3 threshold
# emotion distribution: primary + secondary emotions in one shared counter
# streak: consecutive local calendar days with an entry, ending today

from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional

from aceso.models.insights import MoodInsight
from aceso.models.journal import JournalEntry
from aceso.services.rounding import round_half_up

WINDOW = timedelta(days=7)
TREND_THRESHOLD = 0.3


def _window_average(entries: Iterable[JournalEntry]) -> float:
    """mean mood rating, treating missing ratings as 0. empty window averages to 0."""
    ratings = [e.mood_rating or 0 for e in entries]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


def classify_trend(current: float, previous: float) -> str:
    """improving / declining only when the change is strictly beyond the threshold.

    an empty previous window averages to 0, so any populated current week
    reads as improving. kept as-is for compatibility with existing clients.
    """
    if current > previous + TREND_THRESHOLD:
        return "improving"
    if current < previous - TREND_THRESHOLD:
        return "declining"
    return "stable"


def emotion_distribution(entries: Iterable[JournalEntry]) -> dict[str, int]:
    counts: Counter = Counter()
    for entry in entries:
        if entry.emotions is None:
            continue
        counts[entry.emotions.primary_emotion] += 1
        counts.update(entry.emotions.secondary_emotions)
    return dict(counts)


def _local_date(moment: datetime) -> date:
    return moment.astimezone().date()


def streak_days(entries: Iterable[JournalEntry], now: datetime) -> int:
    """consecutive calendar days with activity, walking back from today until a gap"""
    active_days = {_local_date(e.timestamp) for e in entries}
    day = _local_date(now)
    streak = 0
    while day in active_days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def compute_mood_insight(entries: list[JournalEntry], now: Optional[datetime] = None) -> MoodInsight:
    """build the mood insight view for an entry snapshot"""
    if not entries:
        return MoodInsight()

    now = now or datetime.now(timezone.utc)
    week_start = now - WINDOW
    previous_start = now - 2 * WINDOW

    current_week = [e for e in entries if e.timestamp >= week_start]
    previous_week = [e for e in entries if previous_start <= e.timestamp < week_start]

    weekly_average = _window_average(current_week)
    previous_average = _window_average(previous_week)

    return MoodInsight(
        weeklyAverage=round_half_up(weekly_average),
        trend=classify_trend(weekly_average, previous_average),
        emotionDistribution=emotion_distribution(entries),
        totalEntries=len(entries),
        streakDays=streak_days(entries, now),
    )
