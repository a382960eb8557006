"""
Analysis result returned to the caller.
"""

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResult(BaseModel):
    """
    Combined analysis of one journal entry.

    Built once per request and returned as ``ai`` in the response body.
    Serialized with camelCase keys (``emotionScore``, ``stressScore``).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sentiment: float = Field(..., ge=-1.0, le=1.0, description="Polarity: -1 most negative, +1 most positive")
    emotion: str = Field(..., description="Lowercase emotion label, 'neutral' when undetected")
    emotion_score: float = Field(..., alias="emotionScore", ge=0.0, le=1.0, description="Confidence of the emotion label")
    summary: str = Field(..., min_length=1, description="Model summary or truncated entry text")
    stress_score: int = Field(..., alias="stressScore", ge=0, le=10, description="Derived stress level")
    suggestions: list[str] = Field(default_factory=list, description="Canned suggestions, in rule order")
