"""
Pydantic data models for the Entry Analysis Service.

Includes:
- Inference models (InferenceRequest, ResponseShape, DecodedResponse, LabelScore)
- Analysis models (AnalysisResult)
"""

from entry_analysis.models.analysis_models import AnalysisResult
from entry_analysis.models.inference_models import (
    DecodedResponse,
    InferenceRequest,
    LabelScore,
    RawInferenceResponse,
    ResponseShape,
)

__all__ = [
    # Inference models
    "InferenceRequest",
    "RawInferenceResponse",
    "ResponseShape",
    "DecodedResponse",
    "LabelScore",
    # Analysis models
    "AnalysisResult",
]
