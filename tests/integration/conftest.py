"""Integration test fixtures.

The FastAPI app is exercised end to end through TestClient. The two external
collaborators (identity provider, hosted inference) are replaced through
``app.dependency_overrides``; everything between them runs for real.
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from entry_analysis.api.dependencies import get_inference_client, get_settings, get_token_verifier
from entry_analysis.auth.base_verifier import BaseTokenVerifier, CallerIdentity
from entry_analysis.exceptions import InvalidTokenError
from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.main import app

VALID_TOKEN = "valid-id-token"
TEST_UID = "user-123"


class StubTokenVerifier(BaseTokenVerifier):
    """Accepts VALID_TOKEN only."""

    async def verify(self, token: str) -> CallerIdentity:
        if token != VALID_TOKEN:
            raise InvalidTokenError("unknown token")
        return CallerIdentity(uid=TEST_UID, claims={"uid": TEST_UID})


class StubInferenceClient(BaseInferenceClient):
    """Answers each model from ``responses``; exception values are raised.

    Every call is recorded in ``calls`` as (model, payload).
    """

    def __init__(self, responses: Dict[str, Any]):
        super().__init__(base_url="https://inference.test/models")
        self.responses = responses
        self.calls: list[tuple[str, dict]] = []

    async def invoke(self, model: str, payload: dict) -> Any:
        self.calls.append((model, payload))
        response = self.responses[model]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def stub_inference_client(
    test_settings, sentiment_response, emotion_response, summary_response
) -> StubInferenceClient:
    return StubInferenceClient(
        {
            test_settings.SENTIMENT_MODEL: sentiment_response,
            test_settings.EMOTION_MODEL: emotion_response,
            test_settings.SUMMARY_MODEL: summary_response,
        }
    )


@pytest.fixture
def api_client(test_settings, stub_inference_client):
    """TestClient with identity provider and inference client stubbed."""
    verifier = StubTokenVerifier()
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_inference_client] = lambda: stub_inference_client
    app.dependency_overrides[get_token_verifier] = lambda: verifier

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
