"""
Scoring rules: sentiment range, stress score and suggestions.

All functions are pure and deterministic.

Note: the stress bonus matches emotion labels exactly while the suggestions
match substrings. "stressed" earns the bonus but no suggestion, and the
emotion model's "anger" label earns neither. Both rule sets are kept as they
are until product decides otherwise.
"""

import math
from typing import Optional

STRESS_MIN = 0
STRESS_MAX = 10
NEGATIVITY_WEIGHT = 6
EMOTION_BONUS = 3
HIGH_STRESS_THRESHOLD = 7

BONUS_EMOTIONS = frozenset({"anxious", "stressed", "angry"})

BREATHING_SUGGESTION = "Try a 5-minute breathing exercise."
GRATITUDE_SUGGESTION = "Write one thing you are grateful for."
GROUNDING_SUGGESTION = "Try grounding: 5-4-3-2-1 exercise."
REFLECTION_SUGGESTION = "Note what went well today."


def map_sentiment_to_range(label: Optional[str], score: float) -> float:
    """
    Map a sentiment label/score pair onto [-1, 1].

    Examples:
        >>> map_sentiment_to_range("NEGATIVE", 0.8)
        -0.8
        >>> map_sentiment_to_range("NEUTRAL", 0.3)
        0
    """
    if not label:
        return 0
    lowered = label.lower()
    if "neg" in lowered:
        return -score
    if "pos" in lowered:
        return score
    return score if score >= 0.5 else 0


def negativity(sentiment: float) -> float:
    """Sentiment in [-1, 1] as negativity in [0, 1] (1 = most negative)."""
    return 1 - (sentiment + 1) / 2


def _round_half_up(value: float) -> int:
    # round() would send 4.5 to 4
    return math.floor(value + 0.5)


def compute_stress_score(sentiment: float, emotion: str) -> int:
    """
    Stress score in [0, 10].

    ``round(negativity * 6)``, plus 3 when the emotion is exactly one of
    anxious / stressed / angry, clamped to [0, 10].
    """
    bonus = EMOTION_BONUS if emotion.lower() in BONUS_EMOTIONS else 0
    score = _round_half_up(negativity(sentiment) * NEGATIVITY_WEIGHT + bonus)
    return max(STRESS_MIN, min(STRESS_MAX, score))


def build_suggestions(stress_score: int, emotion: str) -> list[str]:
    """Suggestions in fixed rule order. Rules are independent, not exclusive."""
    emotion = emotion.lower()
    suggestions = []
    if stress_score >= HIGH_STRESS_THRESHOLD:
        suggestions.append(BREATHING_SUGGESTION)
    if "sad" in emotion:
        suggestions.append(GRATITUDE_SUGGESTION)
    if "anxious" in emotion:
        suggestions.append(GROUNDING_SUGGESTION)
    if "joy" in emotion or "happy" in emotion:
        suggestions.append(REFLECTION_SUGGESTION)
    return suggestions


def assess_stress(sentiment: float, emotion: str) -> tuple[int, list[str]]:
    """Stress score and the suggestions it triggers."""
    stress_score = compute_stress_score(sentiment, emotion)
    return stress_score, build_suggestions(stress_score, emotion)
