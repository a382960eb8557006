"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external services.
"""

from unittest.mock import AsyncMock

import pytest

from entry_analysis.analysis.pipeline import EntryAnalyzer
from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.models.inference_models import InferenceRequest


@pytest.fixture
def mock_inference_client(
    test_settings, sentiment_response, emotion_response, summary_response
):
    """Mock inference client answering each configured model with its fixture.

    Replace ``responses[model]`` with an exception instance to make that call fail:
        mock_inference_client.responses["test/summary"] = InferenceTransportError(...)
    """
    mock = AsyncMock(spec=BaseInferenceClient)
    mock.responses = {
        test_settings.SENTIMENT_MODEL: sentiment_response,
        test_settings.EMOTION_MODEL: emotion_response,
        test_settings.SUMMARY_MODEL: summary_response,
    }

    async def mock_run(request: InferenceRequest):
        response = mock.responses[request.model]
        if isinstance(response, Exception):
            raise response
        return response

    mock.run = AsyncMock(side_effect=mock_run)
    return mock


@pytest.fixture
def entry_analyzer(mock_inference_client, test_settings) -> EntryAnalyzer:
    """EntryAnalyzer wired to the mock inference client."""
    return EntryAnalyzer(client=mock_inference_client, settings=test_settings)
