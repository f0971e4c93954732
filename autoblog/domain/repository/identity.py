"""Auth identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from autoblog.domain.model.identity import AuthIdentity
from autoblog.domain.value import UserId


class AuthIdentityRepository(ABC):
    """Repository for backing identity records."""

    @abstractmethod
    async def find_by_key(self, identity_key: UserId) -> Optional[AuthIdentity]:
        """Find an identity record by identity key.

        Args:
            identity_key: Derived identity key (e.g. ``naver:123``)

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        """Find an identity record by email."""
        pass

    @abstractmethod
    async def create(self, identity: AuthIdentity) -> AuthIdentity:
        """Create an identity record.

        Raises:
            AlreadyExistsError: If the identity key or email is taken
        """
        pass

    @abstractmethod
    async def save(self, identity: AuthIdentity) -> AuthIdentity:
        """Update an existing identity record.

        Raises:
            NotFoundError: If no record exists for the identity key
        """
        pass
