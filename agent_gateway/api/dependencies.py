"""FastAPI dependencies for authentication.

Invariants:
    - require_identity raises AuthenticationRequiredError (401) when no valid session exists
    - Bearer token takes precedence over the session cookie
    - Runs before the request body is read, so unauthenticated calls never reach validation
"""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from agent_gateway.config import get_settings
from agent_gateway.core.domain_types import AuthenticatedIdentity
from agent_gateway.core.errors import AuthenticationRequiredError
from agent_gateway.infrastructure.session_auth import SessionVerifier

# Optional bearer token (won't raise error if missing)
security_optional = HTTPBearer(auto_error=False)


def get_session_verifier() -> SessionVerifier:
    return SessionVerifier.from_settings(get_settings())


async def require_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(security_optional),
    verifier: SessionVerifier = Depends(get_session_verifier),
) -> AuthenticatedIdentity:
    """Resolve the caller from a Bearer token or the session cookie."""
    token = credentials.credentials if credentials else None
    if not token:
        token = request.cookies.get(get_settings().session_cookie_name)
    identity = verifier.verify(token)
    if identity is None:
        raise AuthenticationRequiredError()
    return identity
