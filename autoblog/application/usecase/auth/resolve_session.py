"""Resolve session use case."""

from pydantic import BaseModel

from autoblog.config import Settings
from autoblog.domain.service import JWTService
from autoblog.domain.value import SessionContext, UserId


class ResolveSessionRequest(BaseModel):
    """Resolve session request."""

    token: str  # Session token from cookie


class ResolveSessionUseCase:
    """Use case for turning a session token into a SessionContext."""

    def __init__(self, jwt_service: JWTService, settings: Settings) -> None:
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: ResolveSessionRequest) -> SessionContext:
        """Verify the token and build the caller's context.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_session_token(request.token)
        admins = {email.lower() for email in self.settings.admin.emails}

        return SessionContext(
            user_id=UserId(payload.sub),
            email=payload.email,
            provider=payload.provider,
            email_verified=payload.email_verified,
            is_admin=bool(payload.email) and payload.email.lower() in admins,
        )
