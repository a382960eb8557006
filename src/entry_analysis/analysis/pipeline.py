"""
Entry analysis pipeline.

Runs the three model calls strictly in sequence and assembles the
AnalysisResult:

    sentiment -> emotion -> summary (best effort) -> stress + suggestions

Sentiment and emotion are mandatory: their InferenceError propagates and
the request fails. The summary stage converts its own InferenceError into
the truncated-text fallback.
"""

import time

import structlog

from entry_analysis.analysis.normalizer import (
    extract_label_score,
    extract_summary,
    extract_summary_text,
    fallback_summary,
)
from entry_analysis.analysis.scoring import assess_stress, map_sentiment_to_range
from entry_analysis.config import Settings
from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.inference.exceptions import InferenceError
from entry_analysis.models.analysis_models import AnalysisResult
from entry_analysis.models.inference_models import InferenceRequest, LabelScore
from entry_analysis.monitoring.metrics import summary_fallbacks_total

logger = structlog.get_logger(__name__)

DEFAULT_EMOTION = "neutral"


class EntryAnalyzer:
    """
    Orchestrates inference calls for one journal entry.

    Stateless apart from its injected collaborators; a new instance per
    request is cheap.
    """

    def __init__(self, client: BaseInferenceClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze a non-empty entry text.

        Raises:
            InferenceError: Sentiment or emotion call failed
        """
        start_time = time.perf_counter()

        sentiment_pair = await self.classify_sentiment(text)
        sentiment = map_sentiment_to_range(sentiment_pair.label, sentiment_pair.score)

        emotion_pair = await self.classify_emotion(text)
        emotion = (emotion_pair.label or DEFAULT_EMOTION).lower()

        summary = await self.summarize(text)

        stress_score, suggestions = assess_stress(sentiment, emotion)

        logger.info(
            "Entry analyzed",
            sentiment_label=sentiment_pair.label,
            sentiment=sentiment,
            emotion=emotion,
            stress_score=stress_score,
            suggestions_count=len(suggestions),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return AnalysisResult(
            sentiment=sentiment,
            emotion=emotion,
            emotion_score=emotion_pair.score,
            summary=summary,
            stress_score=stress_score,
            suggestions=suggestions,
        )

    async def classify_sentiment(self, text: str) -> LabelScore:
        request = InferenceRequest(model=self.settings.SENTIMENT_MODEL, payload={"inputs": text})
        return extract_label_score(await self.client.run(request))

    async def classify_emotion(self, text: str) -> LabelScore:
        request = InferenceRequest(model=self.settings.EMOTION_MODEL, payload={"inputs": text})
        return extract_label_score(await self.client.run(request))

    async def summarize(self, text: str) -> str:
        """Model summary of ``text``; never raises."""
        request = InferenceRequest(
            model=self.settings.SUMMARY_MODEL,
            payload={
                "inputs": text,
                "parameters": {
                    "min_length": self.settings.SUMMARY_MIN_LENGTH,
                    "max_length": self.settings.SUMMARY_MAX_LENGTH,
                },
            },
        )
        try:
            raw = await self.client.run(request)
        except InferenceError as exc:
            logger.error(
                "Summary model failed, using truncated text",
                model=exc.model,
                kind=exc.kind.value,
                status_code=exc.status_code,
                error=exc.message,
            )
            summary_fallbacks_total.labels(reason="inference_error").inc()
            return fallback_summary(text, self.settings.SUMMARY_FALLBACK_CHARS)

        if not extract_summary_text(raw):
            logger.warning("Summary model returned no text, using truncated text")
            summary_fallbacks_total.labels(reason="empty").inc()
        return extract_summary(raw, text, self.settings.SUMMARY_FALLBACK_CHARS)
