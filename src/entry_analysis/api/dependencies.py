"""
FastAPI dependency injection for the Entry Analysis Service.

Provides singleton instances of shared resources (inference client with its
connection pool, token verifier) and per-request factories.
"""

from functools import lru_cache
from typing import Optional

import structlog
from fastapi import Depends, Header

from entry_analysis.analysis.pipeline import EntryAnalyzer
from entry_analysis.auth.base_verifier import BaseTokenVerifier, CallerIdentity
from entry_analysis.auth.firebase_verifier import FirebaseTokenVerifier
from entry_analysis.config import Settings, settings
from entry_analysis.exceptions import AuthError, InternalError
from entry_analysis.inference.base_client import BaseInferenceClient
from entry_analysis.inference.hf_client import HuggingFaceInferenceClient

logger = structlog.get_logger(__name__)


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_inference_client() -> BaseInferenceClient:
    """
    Get singleton inference client with connection pooling.

    The credential is read from settings once and handed to the client.

    Returns:
        HuggingFaceInferenceClient instance
    """
    config = get_settings()
    return HuggingFaceInferenceClient(
        api_key=config.HF_API_KEY,
        base_url=config.HF_INFERENCE_BASE_URL,
        timeout=config.INFERENCE_TIMEOUT,
    )


@lru_cache()
def get_token_verifier() -> BaseTokenVerifier:
    """Get singleton Firebase token verifier."""
    return FirebaseTokenVerifier(project_id=get_settings().FIREBASE_PROJECT_ID)


async def get_caller(
    authorization: Optional[str] = Header(default=None),
    verifier: BaseTokenVerifier = Depends(get_token_verifier),
) -> CallerIdentity:
    """
    Authenticate the caller from the Authorization header.

    Resolved before the request body is read, so an unauthenticated request
    never reaches the inference client.

    Raises:
        MissingTokenError: No Bearer credential
        InvalidTokenError: Token rejected
        InternalError: Identity provider unavailable or verifier failure
    """
    try:
        return await verifier.authenticate(authorization)
    except AuthError:
        raise
    except Exception as exc:
        logger.error(
            "Token verification failed",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise InternalError(str(exc) or type(exc).__name__) from exc


def get_entry_analyzer(
    client: BaseInferenceClient = Depends(get_inference_client),
    settings: Settings = Depends(get_settings),
) -> EntryAnalyzer:
    """
    Create entry analyzer with injected dependencies.

    Note: EntryAnalyzer is NOT cached because it's lightweight and stateless.
    The client it wraps is a singleton.
    """
    return EntryAnalyzer(client=client, settings=settings)
