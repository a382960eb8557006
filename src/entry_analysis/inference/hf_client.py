"""
Hugging Face hosted inference client.

POST {base_url}/{model} with a bearer credential and a JSON payload such as
``{"inputs": "...", "parameters": {...}}``. Classification models answer with
``[{"label": ..., "score": ...}, ...]`` or the nested
``[[{"label": ..., "score": ...}, ...]]``; summarization models with
``[{"summary_text": ...}]``. A model that is loading or misconfigured may
answer ``{"error": "..."}``, sometimes with a 200 status.
"""

import json
import time
from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import SecretStr

from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.inference.exceptions import (
    InferenceError,
    InferenceMalformedResponseError,
    InferenceRemoteError,
    InferenceTransportError,
)
from entry_analysis.models.inference_models import RawInferenceResponse
from entry_analysis.monitoring.metrics import inference_failures_total, inference_latency_seconds


logger = structlog.get_logger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class HuggingFaceInferenceClient(BaseInferenceClient):
    """
    Async client for the Hugging Face inference router.

    One attempt per call, no retries. A persistent ``httpx.AsyncClient`` is
    shared across requests for connection pooling.
    """

    def __init__(
        self,
        api_key: SecretStr,
        base_url: str = "https://router.huggingface.co/hf-inference/models",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: Service credential sent as a bearer token
            base_url: Router URL models are addressed under
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        super().__init__(base_url, timeout)
        self._api_key = api_key
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Inference client initialized",
            base_url=self.base_url,
            timeout=timeout,
            credential_configured=bool(api_key.get_secret_value()),
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self._api_key.get_secret_value()}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def invoke(self, model: str, payload: Dict[str, Any]) -> RawInferenceResponse:
        url = self.model_url(model)
        logger.info("Calling inference model", url=url)

        start_time = time.perf_counter()
        try:
            data = await self._post(model, url, payload)
        except InferenceError as exc:
            inference_latency_seconds.labels(model=model, success="false").observe(
                time.perf_counter() - start_time
            )
            inference_failures_total.labels(model=model, kind=exc.kind.value).inc()
            raise

        inference_latency_seconds.labels(model=model, success="true").observe(
            time.perf_counter() - start_time
        )
        return data

    async def _post(self, model: str, url: str, payload: Dict[str, Any]) -> RawInferenceResponse:
        client = await self._get_client()
        try:
            response = await client.post(url, json=payload)
        except httpx.TransportError as e:
            logger.warning(
                "Inference transport error",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InferenceTransportError(
                f"Network error calling {model}: {e}",
                model=model,
                details={"error_type": type(e).__name__},
            ) from e

        body = response.text
        logger.info("Inference response", url=url, status=response.status_code, body=body)

        try:
            data = json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            raise InferenceMalformedResponseError(
                f"Non-JSON response from {model} (status {response.status_code}): {body}",
                model=model,
                status_code=response.status_code,
                details={"body": body, "parse_error": str(e)},
            ) from e

        if not response.is_success or (isinstance(data, dict) and data.get("error")):
            raise InferenceRemoteError(
                f"Inference error from {model} ({response.status_code}): {json.dumps(data)}",
                model=model,
                status_code=response.status_code,
                details={"payload": data},
            )

        return data

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed inference client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
