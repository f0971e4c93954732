"""In-memory auth identity repository for testing."""

from typing import Optional

from autoblog.domain.error import AlreadyExistsError, NotFoundError
from autoblog.domain.model import AuthIdentity
from autoblog.domain.repository import AuthIdentityRepository
from autoblog.domain.value import UserId


class InMemoryAuthIdentityRepository(AuthIdentityRepository):
    """In-memory implementation of AuthIdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: dict[UserId, AuthIdentity] = {}

    async def find_by_key(self, identity_key: UserId) -> Optional[AuthIdentity]:
        return self._identities.get(identity_key)

    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        for identity in self._identities.values():
            if identity.email == email:
                return identity
        return None

    async def create(self, identity: AuthIdentity) -> AuthIdentity:
        if identity.identity_key in self._identities:
            raise AlreadyExistsError("Identity", identity.identity_key)
        if await self.find_by_email(identity.email):
            raise AlreadyExistsError("Identity", identity.email)
        self._identities[identity.identity_key] = identity
        return identity

    async def save(self, identity: AuthIdentity) -> AuthIdentity:
        if identity.identity_key not in self._identities:
            raise NotFoundError("Identity", identity.identity_key)
        owner = await self.find_by_email(identity.email)
        if owner is not None and owner.identity_key != identity.identity_key:
            raise AlreadyExistsError("Identity", identity.email)
        self._identities[identity.identity_key] = identity
        return identity
