"""
Abstract identity-token verifier.

The API layer only depends on this interface; the Firebase implementation is
one concrete backend and tests substitute a fake.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from entry_analysis.exceptions import MissingTokenError

BEARER_PREFIX = "Bearer "


class CallerIdentity(BaseModel):
    """Authenticated caller."""
    model_config = ConfigDict(frozen=True)

    uid: str = Field(..., description="Identity-provider user id")
    claims: Dict[str, Any] = Field(default_factory=dict, description="Decoded token claims")


def parse_bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        MissingTokenError: Header absent, not a Bearer credential, or empty token
    """
    authorization = authorization or ""
    if not authorization.startswith(BEARER_PREFIX):
        raise MissingTokenError("Authorization header missing or not a Bearer token")

    token = authorization.split(BEARER_PREFIX)[1]
    if not token:
        raise MissingTokenError("Bearer token is empty")
    return token


class BaseTokenVerifier(ABC):
    """Verifies bearer identity tokens."""

    @abstractmethod
    async def verify(self, token: str) -> CallerIdentity:
        """
        Verify ``token`` and return the caller identity.

        Raises:
            InvalidTokenError: Token rejected by the identity provider
        """

    async def authenticate(self, authorization: Optional[str]) -> CallerIdentity:
        """Parse an Authorization header and verify its bearer token."""
        return await self.verify(parse_bearer_token(authorization))
