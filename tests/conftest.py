"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import SecretStr

from entry_analysis.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.SUMMARY_FALLBACK_CHARS = 50
    """
    return Settings(
        # === Application ===
        APP_NAME="Entry Analysis Service (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Inference ===
        HF_API_KEY=SecretStr("hf_test_key"),
        HF_INFERENCE_BASE_URL="https://inference.test/models",
        INFERENCE_TIMEOUT=5.0,
        SENTIMENT_MODEL="test/sentiment",
        EMOTION_MODEL="test/emotion",
        SUMMARY_MODEL="test/summary",

        # === Summarization ===
        SUMMARY_MIN_LENGTH=10,
        SUMMARY_MAX_LENGTH=60,
        SUMMARY_FALLBACK_CHARS=200,

        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    """Factory fixture loading a recorded JSON response by file stem.

    Usage:
        def test_something(load_fixture):
            raw = load_fixture("sentiment_response")
    """
    def _load(name: str) -> Any:
        with open(fixtures_dir / f"{name}.json") as f:
            return json.load(f)

    return _load


@pytest.fixture
def sentiment_response(load_fixture) -> Any:
    """Nested-shape sentiment response, NEGATIVE first."""
    return load_fixture("sentiment_response")


@pytest.fixture
def emotion_response(load_fixture) -> Any:
    """Nested-shape emotion response, anger first."""
    return load_fixture("emotion_response")


@pytest.fixture
def summary_response(load_fixture) -> Any:
    """Flat-shape summarization response."""
    return load_fixture("summary_response")
