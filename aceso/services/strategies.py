# strategy recommender - static coping-strategy catalog and emotion matching
# labels are matched by case-insensitive substring against a fixed keyword table,
# matched strategies get a personalized reason and sort ahead of the rest

from typing import Optional, Sequence

from aceso.models.strategy import CopingStrategy

COPING_STRATEGIES: tuple[CopingStrategy, ...] = (
    CopingStrategy(
        id="1",
        title="Box Breathing",
        category="breathing",
        description="A simple yet powerful breathing technique used by Navy SEALs to reduce stress and increase focus.",
        steps=(
            "Breathe in slowly through your nose for 4 counts",
            "Hold your breath for 4 counts",
            "Exhale slowly through your mouth for 4 counts",
            "Hold your breath for 4 counts",
            "Repeat for 4-5 minutes",
        ),
        duration="5 minutes",
        difficulty="beginner",
    ),
    CopingStrategy(
        id="2",
        title="Body Scan Meditation",
        category="meditation",
        description="Progressive relaxation technique that helps you connect with your body and release tension.",
        steps=(
            "Lie down or sit comfortably",
            "Close your eyes and take 3 deep breaths",
            "Starting from your toes, notice sensations in each body part",
            "Move slowly upward through your legs, torso, arms, and head",
            "Notice tension and consciously relax each area",
            "Take 3 final deep breaths before opening your eyes",
        ),
        duration="10-15 minutes",
        difficulty="beginner",
    ),
    CopingStrategy(
        id="3",
        title="Mindful Walking",
        category="movement",
        description="Gentle physical activity combined with mindfulness to ground yourself in the present moment.",
        steps=(
            "Find a quiet place to walk, indoors or outdoors",
            "Walk at a slow, comfortable pace",
            "Notice the sensation of your feet touching the ground",
            "Pay attention to your breath and the rhythm of your steps",
            "If your mind wanders, gently bring focus back to walking",
            "Continue for at least 10 minutes",
        ),
        duration="10-20 minutes",
        difficulty="beginner",
    ),
    CopingStrategy(
        id="4",
        title="5-4-3-2-1 Grounding",
        category="grounding",
        description="A sensory awareness technique to help manage anxiety and bring you back to the present.",
        steps=(
            "Acknowledge 5 things you can see around you",
            "Acknowledge 4 things you can touch",
            "Acknowledge 3 things you can hear",
            "Acknowledge 2 things you can smell",
            "Acknowledge 1 thing you can taste",
            "Take a deep breath and notice how you feel",
        ),
        duration="5 minutes",
        difficulty="beginner",
    ),
    CopingStrategy(
        id="5",
        title="Reach Out to Someone",
        category="social",
        description="Social connection is a powerful tool for emotional wellbeing. Share your feelings with someone you trust.",
        steps=(
            "Think of someone you trust and feel comfortable with",
            "Reach out via call, text, or in person",
            "Share how you're feeling without judgment",
            "Ask if they have time to listen or meet",
            "Practice vulnerability and accept their support",
            "Express gratitude for their time and presence",
        ),
        duration="15-30 minutes",
        difficulty="intermediate",
    ),
    CopingStrategy(
        id="6",
        title="Expressive Journaling",
        category="creative",
        description="Free-form writing to process emotions and gain clarity on your thoughts.",
        steps=(
            "Set aside 15-20 minutes of uninterrupted time",
            "Write continuously without editing or judging",
            "Explore your deepest thoughts and feelings",
            "Don't worry about grammar or structure",
            "Write until the timer goes off",
            "Reflect on what you discovered",
        ),
        duration="15-20 minutes",
        difficulty="beginner",
    ),
    CopingStrategy(
        id="7",
        title="Progressive Muscle Relaxation",
        category="meditation",
        description="Systematically tense and relax muscle groups to reduce physical stress and anxiety.",
        steps=(
            "Sit or lie in a comfortable position",
            "Starting with your feet, tense muscles for 5 seconds",
            "Release tension and notice the relaxation for 10 seconds",
            "Move upward through calves, thighs, abdomen, arms, and face",
            "Pay attention to the difference between tension and relaxation",
            "Finish with 3 deep breaths",
        ),
        duration="10-15 minutes",
        difficulty="intermediate",
    ),
    CopingStrategy(
        id="8",
        title="Yoga Flow",
        category="movement",
        description="Gentle yoga sequence to release tension and improve mood through movement.",
        steps=(
            "Start in child's pose for 1 minute",
            "Move to cat-cow stretches (10 repetitions)",
            "Transition to downward dog (hold 30 seconds)",
            "Flow through sun salutations (3-5 rounds)",
            "End in seated meditation (2-3 minutes)",
            "Notice how your body and mind feel",
        ),
        duration="15-20 minutes",
        difficulty="intermediate",
    ),
)

# canonical emotion keyword -> strategy ids, checked in this order
EMOTION_STRATEGY_MAP: tuple[tuple[str, frozenset[str]], ...] = (
    ("anxious", frozenset({"1", "4", "7"})),
    ("stressed", frozenset({"1", "3", "7"})),
    ("sad", frozenset({"2", "5", "6"})),
    ("angry", frozenset({"3", "7", "8"})),
    ("overwhelmed", frozenset({"1", "4", "6"})),
    ("lonely", frozenset({"5", "6"})),
    ("worried", frozenset({"1", "2", "4"})),
    ("tired", frozenset({"2", "8"})),
)


def match_strategy_ids(emotions: Sequence[str]) -> set[str]:
    """union of strategy ids for every keyword contained in any label"""
    recommended: set[str] = set()
    for emotion in emotions:
        label = emotion.lower()
        for keyword, strategy_ids in EMOTION_STRATEGY_MAP:
            if keyword in label:
                recommended |= strategy_ids
    return recommended


def recommend_strategies(emotions: Optional[Sequence[str]] = None) -> list[CopingStrategy]:
    """full catalog, personalized strategies first.

    the reason always quotes the first label, whichever label actually matched.
    """
    if not emotions:
        return list(COPING_STRATEGIES)

    recommended = match_strategy_ids(emotions)
    reason = f"Recommended based on your recent {emotions[0].lower()} feelings"

    annotated = [
        s.model_copy(update={"personalized_reason": reason}) if s.id in recommended else s
        for s in COPING_STRATEGIES
    ]
    # sorted() is stable, so catalog order holds inside each group
    return sorted(annotated, key=lambda s: s.personalized_reason is None)


def parse_emotion_labels(raw: Optional[str]) -> list[str]:
    """split a comma-separated query value into trimmed, non-empty labels"""
    # blank pieces are dropped, so ",anxious" quotes "anxious" rather than an empty label
    if not raw:
        return []
    return [label.strip() for label in raw.split(",") if label.strip()]
