"""Claim email verification reward use case."""

import logfire
from pydantic import BaseModel

from autoblog.config import Settings
from autoblog.domain.error import BusinessRuleViolationError
from autoblog.domain.service import CreditLedger, ProfileService
from autoblog.domain.value import SessionContext

from .get_profile import ProfileResponse


class ClaimEmailRewardRequest(BaseModel):
    """Claim email reward request."""

    session: SessionContext


class ClaimEmailRewardUseCase:
    """Use case for the one-time credit reward after email verification.

    Calling it again after the reward was paid is harmless and returns the
    unchanged profile.
    """

    def __init__(
        self,
        credit_ledger: CreditLedger,
        profile_service: ProfileService,
        settings: Settings,
    ) -> None:
        self.credit_ledger = credit_ledger
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: ClaimEmailRewardRequest) -> ProfileResponse:
        """Grant the reward if the session's email is verified.

        Raises:
            BusinessRuleViolationError: If the email is not verified
            NotFoundError: If the profile does not exist
        """
        session = request.session
        if not session.email_verified:
            logfire.info("Email reward refused, email unverified", user_id=session.user_id)
            raise BusinessRuleViolationError("Email address is not verified")

        await self.credit_ledger.grant_email_verified_reward(
            session.user_id, self.settings.credits.email_verified_reward_credits
        )
        profile = await self.profile_service.get(session.user_id)
        return ProfileResponse.from_profile(profile)
