"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from autoblog.domain.model import UserProfile, WritingStyle
from autoblog.domain.service import ProfileService
from autoblog.domain.value import SessionContext


class GetProfileRequest(BaseModel):
    """Get profile request."""

    session: SessionContext


class ProfileResponse(BaseModel):
    """Profile document as returned to clients."""

    user_id: str
    email: str
    credit_balance: int
    unlimited: bool
    email_verified_reward_granted: bool
    writing_styles: list[WritingStyle]
    linked_provider_id: str | None
    created_at: datetime
    updated_at: datetime
    revision: int

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            user_id=profile.id,
            email=profile.email,
            credit_balance=profile.credit_balance,
            unlimited=profile.unlimited,
            email_verified_reward_granted=profile.email_verified_reward_granted,
            writing_styles=profile.writing_styles,
            linked_provider_id=profile.linked_provider_id,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            revision=profile.revision,
        )


class GetProfileUseCase:
    """Use case for reading the caller's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Load the caller's profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.get(request.session.user_id)
        return ProfileResponse.from_profile(profile)
