"""Domain value objects for AutoBlog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from autoblog.domain.value.common import ValueObject
from autoblog.domain.value.identifiers import UserId


class AuthProvider(str, Enum):
    """Supported external identity providers."""

    NAVER = "naver"


# Claim value carried by minted credentials, mirrors the provider's domain
PROVIDER_CLAIMS: dict[AuthProvider, str] = {
    AuthProvider.NAVER: "naver.com",
}


def derive_identity_key(provider: AuthProvider, provider_user_id: str) -> UserId:
    """Derive the stable internal identity key for a provider account.

    The key only depends on the provider and the provider-side id, so an
    email change at the provider never orphans the account.
    """
    if not provider_user_id:
        raise ValueError("Provider user id must not be empty")
    return UserId(f"{provider.value}:{provider_user_id}")


class SectionType(str, Enum):
    """Closed set of section types in a generated blog."""

    TEXT = "text"
    IMAGE = "image"
    SUBTITLE = "subtitle"
    SUMMARY = "summary"


class MessageStatus(str, Enum):
    """Status of a support message."""

    PENDING = "pending"
    REPLIED = "replied"


class ExternalIdentityClaim(ValueObject):
    """Verified identity claim produced from a provider access token.

    Short-lived: consumed immediately by login or signup, never persisted.
    """

    provider: AuthProvider
    external_uid: str
    identity_key: UserId
    email: str
    display_name: str = ""
    avatar_url: str | None = None
    raw_provider_payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Email is mandatory for every claim."""
        if not v or "@" not in v:
            raise ValueError("Claim email must be a non-empty address")
        return v


class SessionContext(ValueObject):
    """Identity of the caller for one request.

    Built from a verified session token and passed explicitly to the
    use cases that need the current user.
    """

    user_id: UserId
    email: str | None = None
    provider: str | None = None
    email_verified: bool = False
    is_admin: bool = False
