"""PostgreSQL implementation of the Profile repository."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from autoblog.domain.error import AlreadyExistsError, NotFoundError, RevisionConflictError
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.model import UserProfile
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.value import UserId
from autoblog.persistence.mappers import profile_to_dict, row_to_profile
from autoblog.persistence.tables import user_profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository.

    Each write runs in its own short transaction, so a debit is committed
    before the caller goes on to a slow external call.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        feed: ProfileChangeFeed,
    ) -> None:
        """Initialize repository.

        Args:
            session_factory: Factory for per-operation sessions
            feed: Change feed to publish committed writes on
        """
        super().__init__(feed)
        self.session_factory = session_factory

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        async with self.session_factory() as session:
            stmt = select(user_profiles_table).where(user_profiles_table.c.id == user_id)
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_profile(dict(row)) if row else None

    async def create(self, profile: UserProfile) -> UserProfile:
        try:
            async with self.session_factory.begin() as session:
                await session.execute(
                    user_profiles_table.insert().values(**profile_to_dict(profile))
                )
        except IntegrityError as e:
            raise AlreadyExistsError("Profile", profile.id) from e

        self.feed.publish(profile)
        return profile

    async def update(
        self,
        user_id: UserId,
        changes: dict[str, Any],
        expected_revision: Optional[int] = None,
    ) -> UserProfile:
        async with self.session_factory.begin() as session:
            stmt = select(user_profiles_table).where(user_profiles_table.c.id == user_id)
            result = await session.execute(stmt)
            row = result.mappings().first()
            if row is None:
                raise NotFoundError("Profile", user_id)

            current = row_to_profile(dict(row))
            if expected_revision is not None and current.revision != expected_revision:
                raise RevisionConflictError("Profile", user_id, expected_revision)

            updated = current.with_changes(changes)

            # Conditional write: only lands if nobody committed in between
            stmt = (
                user_profiles_table.update()
                .where(user_profiles_table.c.id == user_id)
                .where(user_profiles_table.c.revision == current.revision)
                .values(**profile_to_dict(updated))
            )
            result = await session.execute(stmt)
            if result.rowcount != 1:
                raise RevisionConflictError("Profile", user_id, current.revision)

        self.feed.publish(updated)
        return updated

    async def list_all(self) -> list[UserProfile]:
        async with self.session_factory() as session:
            stmt = select(user_profiles_table).order_by(
                user_profiles_table.c.created_at.desc()
            )
            result = await session.execute(stmt)
            return [row_to_profile(dict(row)) for row in result.mappings().all()]
