"""Get current user use case."""

from pydantic import BaseModel

from autoblog.domain.service import IdentityService, ProfileService
from autoblog.domain.value import SessionContext


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    session: SessionContext


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    display_name: str
    avatar_url: str | None
    provider: str | None
    is_admin: bool
    credit_balance: int
    unlimited: bool


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user."""

    def __init__(
        self, profile_service: ProfileService, identity_service: IdentityService
    ) -> None:
        self.profile_service = profile_service
        self.identity_service = identity_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the caller's profile and identity record.

        Raises:
            NotFoundError: If the profile does not exist
        """
        session = request.session
        profile = await self.profile_service.get(session.user_id)
        identity = await self.identity_service.find(session.user_id)

        return GetCurrentUserResponse(
            user_id=profile.id,
            email=profile.email,
            display_name=identity.display_name if identity else "",
            avatar_url=identity.avatar_url if identity else None,
            provider=session.provider,
            is_admin=session.is_admin,
            credit_balance=profile.credit_balance,
            unlimited=profile.unlimited,
        )
