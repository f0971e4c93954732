"""In-memory profile repository for testing."""

from typing import Any, Optional

from autoblog.domain.error import AlreadyExistsError, NotFoundError, RevisionConflictError
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.model import UserProfile
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Reads and writes never yield to the event loop between the revision
    check and the store, so each write is atomic.
    """

    def __init__(self, feed: Optional[ProfileChangeFeed] = None) -> None:
        super().__init__(feed or ProfileChangeFeed())
        self._profiles: dict[UserId, UserProfile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    async def create(self, profile: UserProfile) -> UserProfile:
        if profile.id in self._profiles:
            raise AlreadyExistsError("Profile", profile.id)
        self._profiles[profile.id] = profile
        self.feed.publish(profile)
        return profile

    async def update(
        self,
        user_id: UserId,
        changes: dict[str, Any],
        expected_revision: Optional[int] = None,
    ) -> UserProfile:
        current = self._profiles.get(user_id)
        if current is None:
            raise NotFoundError("Profile", user_id)
        if expected_revision is not None and current.revision != expected_revision:
            raise RevisionConflictError("Profile", user_id, expected_revision)

        updated = current.with_changes(changes)
        self._profiles[user_id] = updated
        self.feed.publish(updated)
        return updated

    async def list_all(self) -> list[UserProfile]:
        return sorted(
            self._profiles.values(), key=lambda p: p.created_at, reverse=True
        )
