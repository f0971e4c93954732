"""Session resolution shared by the authenticated routes."""

from fastapi import status

from autoblog.application.usecase.auth import ResolveSessionRequest, ResolveSessionUseCase
from autoblog.domain.value import SessionContext
from autoblog.interface.error import APIError

# Name of the HTTP-only cookie holding the session token
AUTH_COOKIE = "auth_token"


async def require_session(
    auth_token: str | None, resolve_session_use_case: ResolveSessionUseCase
) -> SessionContext:
    """Resolve the session cookie or fail with 401.

    Raises:
        APIError: If there is no cookie
        JWTError: If the token is invalid or expired
    """
    if not auth_token:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED, "unauthenticated", "Authentication required"
        )
    return await resolve_session_use_case.execute(ResolveSessionRequest(token=auth_token))
