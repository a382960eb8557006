"""
API routes for entry analysis.

POST /processEntry authenticates the caller, then runs the analysis pipeline
on the entry text. Authentication is a dependency and resolves before the
body is read, so unauthenticated requests never reach the inference client.
"""

import json
import time

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError as PydanticValidationError

from entry_analysis.analysis.pipeline import EntryAnalyzer
from entry_analysis.api.dependencies import get_caller, get_entry_analyzer, get_settings
from entry_analysis.api.models import (
    ErrorResponse,
    HealthResponse,
    ProcessEntryRequest,
    ProcessEntryResponse,
)
from entry_analysis.auth.base_verifier import CallerIdentity
from entry_analysis.config import Settings
from entry_analysis.exceptions import (
    EntryAnalysisError,
    EntryValidationError,
    InternalError,
    InvalidRequestError,
)
from entry_analysis.inference.exceptions import InferenceError
from entry_analysis.monitoring.metrics import entries_processed_total

logger = structlog.get_logger(__name__)

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

router = APIRouter()


async def read_entry_request(request: Request) -> ProcessEntryRequest:
    """
    Parse the request body. An empty body reads as ``{}``.

    Raises:
        InvalidRequestError: Body is not a JSON object with string fields
    """
    body = await request.body()
    if not body:
        return ProcessEntryRequest()

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestError("Request body is not valid JSON") from e

    if data is None:
        return ProcessEntryRequest()
    if not isinstance(data, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        return ProcessEntryRequest.model_validate(data)
    except PydanticValidationError as e:
        raise InvalidRequestError(
            "Request body has invalid fields", details={"errors": e.errors()}
        ) from e


@router.options("/processEntry", status_code=status.HTTP_204_NO_CONTENT)
async def process_entry_preflight() -> Response:
    """CORS preflight."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=PREFLIGHT_HEADERS)


@router.post(
    "/processEntry",
    response_model=ProcessEntryResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
    summary="Analyze a journal entry",
    description="""
    Classify sentiment and emotion of the entry text, summarize it, and
    derive a stress score with suggestions.

    Requires `Authorization: Bearer <Firebase ID token>`.
    """,
    responses={
        200: {"description": "Entry analyzed"},
        400: {"model": ErrorResponse, "description": "Missing text or invalid body"},
        401: {"model": ErrorResponse, "description": "Missing or rejected ID token"},
        500: {"model": ErrorResponse, "description": "Inference or internal failure"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ProcessEntryRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def process_entry(
    request: Request,
    caller: CallerIdentity = Depends(get_caller),
    analyzer: EntryAnalyzer = Depends(get_entry_analyzer),
) -> ProcessEntryResponse:
    start_time = time.perf_counter()
    log = logger.bind(uid=caller.uid)

    entry = await read_entry_request(request)
    if not entry.text:
        raise EntryValidationError("Entry text is missing or empty")

    log.info(
        "Entry received",
        text_length=len(entry.text),
        has_audio=entry.audio_url is not None,
    )

    try:
        ai = await analyzer.analyze(entry.text)
    except (EntryAnalysisError, InferenceError):
        raise
    except Exception as exc:
        log.error("Entry analysis failed", error_type=type(exc).__name__)
        raise InternalError(str(exc) or type(exc).__name__) from exc

    entries_processed_total.labels(status="success").inc()
    log.info(
        "Entry processed",
        stress_score=ai.stress_score,
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return ProcessEntryResponse(ok=True, uid=caller.uid, ai=ai)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Report configuration health. No model is called.
    """
    credential_configured = bool(settings.HF_API_KEY.get_secret_value())
    return HealthResponse(
        status="healthy" if credential_configured else "degraded",
        version=settings.APP_VERSION,
        models={
            "sentiment": settings.SENTIMENT_MODEL,
            "emotion": settings.EMOTION_MODEL,
            "summary": settings.SUMMARY_MODEL,
        },
        credential_configured=credential_configured,
    )
