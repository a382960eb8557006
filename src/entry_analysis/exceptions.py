"""
Request-level exceptions for the Entry Analysis Service.

Each exception carries the machine-readable ``error_code`` that ends up in
the ``{"ok": false, "error": ...}`` response body and the HTTP status the
API layer maps it to. Inference failures live in
``entry_analysis.inference.exceptions``.
"""


class EntryAnalysisError(Exception):
    """
    Base exception for request-level failures.

    Attributes:
        message: Human-readable description (logged)
        error_code: Value returned to the caller in the ``error`` field
        status_code: HTTP status the API layer responds with
        details: Extra context for logs
    """
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str | None = None, details: dict | None = None):
        message = message or self.error_code
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AuthError(EntryAnalysisError):
    """Caller could not be authenticated. No inference call is made."""
    error_code = "unauthenticated"
    status_code = 401


class MissingTokenError(AuthError):
    """Authorization header absent or not a Bearer credential."""
    error_code = "missing_id_token"


class InvalidTokenError(AuthError):
    """Identity provider rejected the bearer token (bad, expired, revoked)."""
    error_code = "invalid_id_token"


class EntryValidationError(EntryAnalysisError):
    """Required input text is missing or empty."""
    error_code = "missing_text"
    status_code = 400


class InvalidRequestError(EntryValidationError):
    """Request body is not a JSON object of the expected shape."""
    error_code = "invalid_request"


class InternalError(EntryAnalysisError):
    """
    Unexpected failure while processing an entry.

    The original message is surfaced to the (authenticated) caller.
    """
    error_code = "internal_error"
    status_code = 500
