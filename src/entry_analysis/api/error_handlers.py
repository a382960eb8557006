"""
FastAPI exception handlers for structured error responses.

Every failure is answered as ``{"ok": false, "error": ...}``:
- request-level errors carry their ``error_code`` (missing_id_token, missing_text, ...)
- inference and internal errors carry their message
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from entry_analysis.exceptions import (
    AuthError,
    EntryAnalysisError,
    EntryValidationError,
    InternalError,
)
from entry_analysis.inference.exceptions import InferenceError
from entry_analysis.monitoring.metrics import entries_processed_total

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": error})


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """
    Handle authentication failures.

    Maps to 401 Unauthorized. Raised before any inference call.
    """
    logger.warning(
        "Authentication failed",
        extra={"error_code": exc.error_code, "reason": exc.message, "details": exc.details},
    )
    entries_processed_total.labels(status="unauthenticated").inc()
    return error_response(status.HTTP_401_UNAUTHORIZED, exc.error_code)


async def entry_validation_error_handler(
    request: Request, exc: EntryValidationError
) -> JSONResponse:
    """
    Handle missing or malformed input.

    Maps to 400 Bad Request.
    """
    logger.warning(
        "Invalid entry request",
        extra={"error_code": exc.error_code, "reason": exc.message},
    )
    entries_processed_total.labels(status="invalid").inc()
    return error_response(status.HTTP_400_BAD_REQUEST, exc.error_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    Maps to 400 Bad Request.
    """
    logger.warning("Request validation failed", extra={"errors": exc.errors()})
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid_request")


async def inference_error_handler(request: Request, exc: InferenceError) -> JSONResponse:
    """
    Handle failures of the mandatory sentiment/emotion calls.

    Maps to 500 Internal Server Error with the error message.
    """
    logger.error(
        "Inference failed",
        extra={
            "model": exc.model,
            "kind": exc.kind.value,
            "status_code": exc.status_code,
            "details": exc.details,
        },
    )
    entries_processed_total.labels(status="error").inc()
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def internal_error_handler(request: Request, exc: EntryAnalysisError) -> JSONResponse:
    """
    Handle unexpected errors wrapped by the route.

    Maps to 500 Internal Server Error with the error message.
    """
    logger.error(
        "Entry processing failed",
        extra={"error_code": exc.error_code, "details": exc.details},
        exc_info=exc.__cause__ or exc,
    )
    entries_processed_total.labels(status="error").inc()
    return error_response(exc.status_code, exc.message)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle errors raised outside the entry route.

    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    AuthError: auth_error_handler,
    EntryValidationError: entry_validation_error_handler,
    RequestValidationError: request_validation_error_handler,
    InferenceError: inference_error_handler,
    InternalError: internal_error_handler,
    Exception: generic_error_handler,
}
