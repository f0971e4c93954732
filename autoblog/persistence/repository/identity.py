"""PostgreSQL implementation of the AuthIdentity repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from autoblog.domain.error import AlreadyExistsError, NotFoundError
from autoblog.domain.model import AuthIdentity
from autoblog.domain.repository import AuthIdentityRepository
from autoblog.domain.value import UserId
from autoblog.persistence.mappers import identity_to_dict, row_to_identity
from autoblog.persistence.tables import auth_identities_table


class PostgresAuthIdentityRepository(AuthIdentityRepository):
    """PostgreSQL implementation of AuthIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_key(self, identity_key: UserId) -> Optional[AuthIdentity]:
        stmt = select(auth_identities_table).where(
            auth_identities_table.c.identity_key == identity_key
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        stmt = select(auth_identities_table).where(
            auth_identities_table.c.email == email
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    async def create(self, identity: AuthIdentity) -> AuthIdentity:
        """Insert an identity record.

        The insert runs in a savepoint so a duplicate leaves the request
        transaction usable.
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    auth_identities_table.insert().values(**identity_to_dict(identity))
                )
        except IntegrityError as e:
            raise AlreadyExistsError("Identity", identity.identity_key) from e
        return identity

    async def save(self, identity: AuthIdentity) -> AuthIdentity:
        try:
            async with self.session.begin_nested():
                stmt = (
                    auth_identities_table.update()
                    .where(auth_identities_table.c.identity_key == identity.identity_key)
                    .values(**identity_to_dict(identity))
                )
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise AlreadyExistsError("Identity", identity.email) from e

        if result.rowcount == 0:
            raise NotFoundError("Identity", identity.identity_key)
        return identity
