"""
Firebase ID-token verification via the Firebase Admin SDK.

The Admin app is initialized on first use with Application Default
Credentials. ``verify_id_token`` only needs the project id and Google's
public signing certificates, so no service-account key is required.
"""

from typing import Optional

import firebase_admin
import structlog
from firebase_admin import auth as firebase_auth
from starlette.concurrency import run_in_threadpool

from entry_analysis.auth.base_verifier import BaseTokenVerifier, CallerIdentity
from entry_analysis.exceptions import InvalidTokenError

logger = structlog.get_logger(__name__)

APP_NAME = "entry-analysis"

# ExpiredIdTokenError and RevokedIdTokenError subclass InvalidIdTokenError
REJECTED_TOKEN_ERRORS = (
    ValueError,
    firebase_auth.InvalidIdTokenError,
    firebase_auth.UserDisabledError,
)


class FirebaseTokenVerifier(BaseTokenVerifier):
    """Verifies Firebase Authentication ID tokens."""

    def __init__(self, project_id: Optional[str] = None, check_revoked: bool = False):
        """
        Args:
            project_id: Firebase project id; None lets the SDK resolve it
                from the environment
            check_revoked: Also check the token against revocations (extra
                network call, needs service-account credentials)
        """
        self.project_id = project_id
        self.check_revoked = check_revoked
        self._app: Optional[firebase_admin.App] = None

    def _get_app(self) -> firebase_admin.App:
        if self._app is None:
            try:
                self._app = firebase_admin.get_app(APP_NAME)
            except ValueError:
                options = {"projectId": self.project_id} if self.project_id else None
                self._app = firebase_admin.initialize_app(options=options, name=APP_NAME)
                logger.info("Firebase Admin app initialized", project_id=self.project_id)
        return self._app

    def _verify_sync(self, token: str) -> dict:
        return firebase_auth.verify_id_token(
            token, app=self._get_app(), check_revoked=self.check_revoked
        )

    async def verify(self, token: str) -> CallerIdentity:
        try:
            decoded = await run_in_threadpool(self._verify_sync, token)
        except REJECTED_TOKEN_ERRORS as exc:
            logger.warning(
                "ID token rejected",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise InvalidTokenError(
                "ID token rejected by identity provider",
                details={"error_type": type(exc).__name__},
            ) from exc

        return CallerIdentity(uid=decoded["uid"], claims=decoded)
