"""
Hosted inference client abstraction and implementation.

Components:
- BaseInferenceClient: Abstract base class for inference clients
- HuggingFaceInferenceClient: httpx-based client for the Hugging Face router
- exceptions: InferenceError and its transport / malformed / remote subclasses
"""

from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.inference.exceptions import (
    InferenceError,
    InferenceErrorKind,
    InferenceMalformedResponseError,
    InferenceRemoteError,
    InferenceTransportError,
)
from entry_analysis.inference.hf_client import HuggingFaceInferenceClient

__all__ = [
    "BaseInferenceClient",
    "HuggingFaceInferenceClient",
    "InferenceError",
    "InferenceErrorKind",
    "InferenceTransportError",
    "InferenceMalformedResponseError",
    "InferenceRemoteError",
]
