"""
Entry analysis: response normalization, scoring rules and the orchestrating pipeline.
"""

from entry_analysis.analysis.normalizer import (
    decode_response,
    extract_label_score,
    extract_summary,
    extract_summary_text,
    fallback_summary,
)
from entry_analysis.analysis.pipeline import EntryAnalyzer
from entry_analysis.analysis.scoring import (
    assess_stress,
    build_suggestions,
    compute_stress_score,
    map_sentiment_to_range,
)

__all__ = [
    "EntryAnalyzer",
    "decode_response",
    "extract_label_score",
    "extract_summary",
    "extract_summary_text",
    "fallback_summary",
    "map_sentiment_to_range",
    "compute_stress_score",
    "build_suggestions",
    "assess_stress",
]
