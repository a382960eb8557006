"""
Abstract base client for hosted model inference.

Defines the contract the orchestrator depends on, so the HTTP backend can be
swapped (or faked in tests) without touching the analysis pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

import structlog

from entry_analysis.models.inference_models import InferenceRequest, RawInferenceResponse


logger = structlog.get_logger(__name__)


class BaseInferenceClient(ABC):
    """
    Abstract base class for inference clients.

    Responsibilities:
    - Send one request per call to a named model
    - Parse the response body as JSON
    - Classify failures into InferenceError subclasses

    Does NOT handle:
    - Shape normalization (that's the normalizer's job)
    - Retries (a call is a single attempt)
    """

    def __init__(self, base_url: str, timeout: float = 5.0):
        """
        Args:
            base_url: Base URL models are addressed under
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    @abstractmethod
    async def invoke(self, model: str, payload: Dict[str, Any]) -> RawInferenceResponse:
        """
        Call ``model`` with ``payload`` and return the parsed JSON response.

        Raises:
            InferenceTransportError: Network failure or timeout
            InferenceMalformedResponseError: Body is not JSON
            InferenceRemoteError: Error status or error payload
        """

    async def run(self, request: InferenceRequest) -> RawInferenceResponse:
        """Invoke a prepared InferenceRequest."""
        return await self.invoke(request.model, request.payload)

    def model_url(self, model: str) -> str:
        """URL the given model is served at."""
        return f"{self.base_url}/{model}"

    async def close(self):
        """Release connections. Default implementation does nothing."""
        logger.debug("Closing inference client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
