"""Auth identity domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire

from autoblog.domain.model import AuthIdentity
from autoblog.domain.repository import AuthIdentityRepository
from autoblog.domain.value import ExternalIdentityClaim, UserId

from .base import Service


class IdentityService(Service):
    """Domain service for the backing identity records."""

    def __init__(self, identity_repository: AuthIdentityRepository) -> None:
        self.identity_repository = identity_repository

    async def find(self, identity_key: UserId) -> Optional[AuthIdentity]:
        """Get the identity record for a key if there is one."""
        return await self.identity_repository.find_by_key(identity_key)

    async def create_from_claim(self, claim: ExternalIdentityClaim) -> AuthIdentity:
        """Create the identity record for a verified claim.

        Raises:
            AlreadyExistsError: If the key or the email is already registered
        """
        with logfire.span(
            "identity_service.create_from_claim", identity_key=claim.identity_key
        ):
            identity = AuthIdentity(
                identity_key=claim.identity_key,
                provider=claim.provider,
                provider_user_id=claim.external_uid,
                email=claim.email,
                display_name=claim.display_name,
                avatar_url=claim.avatar_url,
                last_login_at=datetime.now(timezone.utc),
            )
            created = await self.identity_repository.create(identity)
            logfire.info(
                "Identity record created",
                identity_key=claim.identity_key,
                provider=claim.provider.value,
            )
            return created

    async def record_login(
        self, identity: AuthIdentity, claim: ExternalIdentityClaim
    ) -> AuthIdentity:
        """Refresh the identity record with the latest provider data."""
        with logfire.span(
            "identity_service.record_login", identity_key=identity.identity_key
        ):
            now = datetime.now(timezone.utc)
            refreshed = identity.model_copy(
                update={
                    "email": claim.email,
                    "display_name": claim.display_name,
                    "avatar_url": claim.avatar_url,
                    "updated_at": now,
                    "last_login_at": now,
                }
            )
            return await self.identity_repository.save(refreshed)
