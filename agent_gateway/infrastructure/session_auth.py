"""Session Verification — resolves a session token to an AuthenticatedIdentity.

Invariants:
    - verify() never raises: any invalid token yields None (caller answers 401)
    - Signature and expiry always checked; algorithms pinned from settings
    - The user id claim must be a non-empty string

Design Decisions:
    - PyJWT HS256 session tokens: the session issuer and the gateway share a secret
    - Returns None instead of raising so the dependency owns the 401 policy
"""

import logging

import jwt

from agent_gateway.config import Settings
from agent_gateway.core.domain_types import AuthenticatedIdentity, UserId

logger = logging.getLogger(__name__)


class SessionVerifier:
    """Verifies signed session tokens."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", user_claim: str = "sub",
    ):
        self.secret = secret
        self.algorithms = [algorithm]
        self.user_claim = user_claim

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionVerifier":
        return cls(
            settings.session_secret,
            algorithm=settings.session_algorithm,
            user_claim=settings.session_user_claim,
        )

    def verify(self, token: str | None) -> AuthenticatedIdentity | None:
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret, algorithms=self.algorithms)
        except jwt.ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")
            return None

        user_id = payload.get(self.user_claim)
        if not isinstance(user_id, str) or not user_id:
            logger.warning(f"Session token has no '{self.user_claim}' claim")
            return None
        return AuthenticatedIdentity(user_id=UserId(user_id))
