"""Profile domain service."""

from typing import Optional

import logfire

from autoblog.domain.error import AlreadyExistsError, NotFoundError
from autoblog.domain.event import ProfileSubscription
from autoblog.domain.model import UserProfile, WritingStyle
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.value import UserId

from .base import Service


class ProfileService(Service):
    """Domain service for profile lifecycle and non-ledger fields."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def find(self, user_id: UserId) -> Optional[UserProfile]:
        """Get a profile if it exists."""
        return await self.profile_repository.find_by_id(user_id)

    async def get(self, user_id: UserId) -> UserProfile:
        """Get a profile.

        Raises:
            NotFoundError: If no profile exists for the identity key
        """
        with logfire.span("profile_service.get", user_id=user_id):
            profile = await self.profile_repository.find_by_id(user_id)
            if profile is None:
                logfire.warn("Profile not found", user_id=user_id)
                raise NotFoundError("Profile", user_id)
            return profile

    async def create(
        self,
        user_id: UserId,
        email: str,
        credits: int,
        linked_provider_id: Optional[str] = None,
        email_verified_reward_granted: bool = False,
    ) -> UserProfile:
        """Create a new profile.

        Args:
            user_id: Identity key
            email: Account email
            credits: Starting balance
            linked_provider_id: External account id when created by a provider signup
            email_verified_reward_granted: Whether the email reward is already spent

        Raises:
            AlreadyExistsError: If the profile already exists
        """
        with logfire.span("profile_service.create", user_id=user_id):
            profile = UserProfile(
                id=user_id,
                email=email,
                credit_balance=credits,
                linked_provider_id=linked_provider_id,
                email_verified_reward_granted=email_verified_reward_granted,
            )
            created = await self.profile_repository.create(profile)
            logfire.info("Profile created", user_id=user_id, credits=credits)
            return created

    async def ensure(
        self, user_id: UserId, email: str, credits: int
    ) -> tuple[UserProfile, bool]:
        """Return the profile, creating it with ``credits`` on first sight.

        A concurrent creator winning the race is not an error: its profile
        is returned instead.

        Returns:
            The profile and whether this call created it
        """
        existing = await self.profile_repository.find_by_id(user_id)
        if existing is not None:
            return existing, False

        try:
            return await self.create(user_id, email, credits), True
        except AlreadyExistsError:
            logfire.info("Profile created concurrently", user_id=user_id)
            return await self.get(user_id), False

    async def save_writing_styles(
        self, user_id: UserId, styles: list[WritingStyle]
    ) -> UserProfile:
        """Replace the saved writing styles (last writer wins)."""
        with logfire.span(
            "profile_service.save_writing_styles", user_id=user_id, count=len(styles)
        ):
            updated = await self.profile_repository.update(
                user_id, {"writing_styles": styles}
            )
            logfire.info("Writing styles saved", user_id=user_id, count=len(styles))
            return updated

    async def list_all(self) -> list[UserProfile]:
        """All profiles, newest first."""
        return await self.profile_repository.list_all()

    def subscribe(self, user_id: UserId) -> ProfileSubscription:
        """Watch a profile for committed changes."""
        return self.profile_repository.subscribe(user_id)
