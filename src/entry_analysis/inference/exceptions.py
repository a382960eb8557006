"""
Exceptions raised by the inference client.

Every failure of a model call is an ``InferenceError`` with a ``kind`` the
caller can branch on. The orchestrator aborts the request on errors from
the mandatory sentiment/emotion calls and falls back on errors from the
optional summary call.
"""

from enum import Enum
from typing import Any, Optional


class InferenceErrorKind(str, Enum):
    """Failure classes of a single model call."""

    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"
    REMOTE_ERROR = "remote_error"


class InferenceError(Exception):
    """
    Base exception for all inference client errors.

    Attributes:
        kind: Failure class (transport, malformed_response, remote_error)
        model: Model identifier the call targeted
        status_code: HTTP status, when a response was received
        details: Raw body text or parsed error payload for diagnosis
    """
    kind: InferenceErrorKind

    def __init__(
        self,
        message: str,
        model: str,
        status_code: Optional[int] = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.model = model
        self.status_code = status_code
        self.details = details or {}


class InferenceTransportError(InferenceError):
    """
    Connection failure, DNS failure or timeout.

    No response was received, so ``status_code`` is None.
    """
    kind = InferenceErrorKind.TRANSPORT


class InferenceMalformedResponseError(InferenceError):
    """Response body is not valid JSON. ``details["body"]`` holds the raw text."""
    kind = InferenceErrorKind.MALFORMED_RESPONSE


class InferenceRemoteError(InferenceError):
    """
    Remote service reported a failure.

    Raised for a non-2xx status, or for a 2xx response whose JSON is an object
    with an ``error`` field (e.g. a model still loading).
    ``details["payload"]`` holds the parsed JSON.
    """
    kind = InferenceErrorKind.REMOTE_ERROR
