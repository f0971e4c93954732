"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from autoblog.config import Settings
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.repository import (
    AuthIdentityRepository,
    MessageRepository,
    ProfileRepository,
)
from autoblog.persistence.database import create_engine, create_session_factory
from autoblog.persistence.repository import (
    PostgresAuthIdentityRepository,
    PostgresMessageRepository,
    PostgresProfileRepository,
)
from autoblog.util.di.base import ProviderBase
from autoblog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.APP)
    def get_profile_repository(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        feed: ProfileChangeFeed,
    ) -> ProfileRepository:
        """Provide Profile repository.

        Profile writes manage their own short transactions, so the
        repository is shared rather than bound to the request session.
        """
        return PostgresProfileRepository(session_factory, feed)

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, session: AsyncSession) -> AuthIdentityRepository:
        """Provide AuthIdentity repository."""
        return PostgresAuthIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        """Provide Message repository."""
        return PostgresMessageRepository(session)
