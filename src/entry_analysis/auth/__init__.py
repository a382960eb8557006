"""
Caller authentication.

- BaseTokenVerifier: interface the API layer depends on
- FirebaseTokenVerifier: Firebase Admin SDK implementation
- parse_bearer_token: Authorization header parsing
"""

from entry_analysis.auth.base_verifier import (
    BaseTokenVerifier,
    CallerIdentity,
    parse_bearer_token,
)
from entry_analysis.auth.firebase_verifier import FirebaseTokenVerifier

__all__ = [
    "BaseTokenVerifier",
    "CallerIdentity",
    "FirebaseTokenVerifier",
    "parse_bearer_token",
]
