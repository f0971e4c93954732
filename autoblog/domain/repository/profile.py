"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from autoblog.domain.model.profile import UserProfile
from autoblog.domain.event import (
    ProfileChanged,
    ProfileChangeFeed,
    ProfileSubscription,
)
from autoblog.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for the UserProfile document store.

    Every successful write is published on the change feed given to the
    implementation.
    """

    def __init__(self, feed: ProfileChangeFeed) -> None:
        self.feed = feed

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by its identity key.

        Args:
            user_id: Identity key

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile.

        Args:
            profile: Profile to insert

        Returns:
            The stored profile

        Raises:
            AlreadyExistsError: If a profile with the same id exists
        """
        pass

    @abstractmethod
    async def update(
        self,
        user_id: UserId,
        changes: dict[str, Any],
        expected_revision: Optional[int] = None,
    ) -> UserProfile:
        """Apply a partial update.

        When ``expected_revision`` is given the write only succeeds if the
        stored document is still at that revision (compare-and-swap).

        Args:
            user_id: Identity key
            changes: Field values to set
            expected_revision: Revision the caller observed

        Returns:
            The updated profile

        Raises:
            NotFoundError: If the profile does not exist
            RevisionConflictError: If the stored revision differs
            BusinessRuleViolationError: If the change breaks a profile invariant
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[UserProfile]:
        """List all profiles, newest first."""
        pass

    def subscribe(
        self,
        user_id: UserId,
        on_change: Optional[Callable[[ProfileChanged], None]] = None,
    ) -> ProfileSubscription:
        """Watch a profile for committed changes."""
        return self.feed.subscribe(user_id, on_change)
