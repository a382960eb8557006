"""
Data models for the inference request/response cycle.

The hosted inference API returns loosely-shaped JSON. ``ResponseShape`` and
``DecodedResponse`` are the tagged form it is decoded into at the boundary;
``LabelScore`` is the canonical result of a classification call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Anything json.loads can produce
RawInferenceResponse = Any


class InferenceRequest(BaseModel):
    """A single model call: target model plus JSON payload."""
    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model identifier, e.g. 'j-hartmann/emotion-english-distilroberta-base'")
    payload: Dict[str, Any] = Field(..., description="JSON body, typically {'inputs': text, 'parameters': {...}}")


class ResponseShape(str, Enum):
    """Observed shapes of a raw inference response."""

    EMPTY = "empty"          # []
    FLAT = "flat"            # [{...}, ...]
    NESTED = "nested"        # [[{...}, ...], ...]
    MALFORMED = "malformed"  # anything else


@dataclass(frozen=True)
class DecodedResponse:
    """
    Tagged view of a raw response.

    ``candidate`` is the first object of the response (first element, or the
    first element of the first inner list) and is only set for FLAT and
    NESTED shapes.
    """
    shape: ResponseShape
    candidate: Optional[Dict[str, Any]] = None


class LabelScore(BaseModel):
    """Best (label, score) pair of a classification call."""
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = Field(default=None, description="Category name, None when extraction failed")
    score: float = Field(default=0.0, description="Confidence, 0.0 when extraction failed")
