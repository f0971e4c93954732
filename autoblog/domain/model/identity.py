"""Auth identity entity.

The backing record the auth system keeps for an identity key. It exists
independently of the application profile: a verified provider account gets
an identity record at signup, and the profile is initialized right after.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from autoblog.domain.model.common import DomainModel
from autoblog.domain.value import AuthProvider, UserId


class AuthIdentity(DomainModel):
    """External account linked to an identity key."""

    identity_key: UserId
    provider: AuthProvider
    provider_user_id: str  # Permanent id from the provider
    email: str
    email_verified: bool = True  # Provider accounts expose verified emails only
    display_name: str = ""
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: Optional[datetime] = None
