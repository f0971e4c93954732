"""Identity provider verification domain service."""

from typing import Any

import logfire
from pydantic import Field

from autoblog.domain.error import (
    IdentityError,
    IdentityErrorKind,
    ProviderUnavailableError,
)
from autoblog.domain.value import AuthProvider, ExternalIdentityClaim, derive_identity_key
from autoblog.domain.value.common import ValueObject

from .base import Service

# Result code the Naver profile API returns for a valid token
NAVER_SUCCESS_CODE = "00"


class ProviderProfile(ValueObject):
    """Profile lookup result as reported by an identity provider."""

    result_code: str
    message: str = ""
    provider_user_id: str | None = None
    email: str | None = None
    name: str | None = None
    nickname: str | None = None
    profile_image: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)


class IdentityProviderClient:
    """Generic client interface for identity providers."""

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        """Look up the account behind an access token.

        Args:
            access_token: OAuth access token issued to the browser

        Returns:
            Provider profile, including the provider's result code

        Raises:
            ProviderUnavailableError: If the provider could not be reached
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service turning provider access tokens into identity claims."""

    def __init__(self, clients: dict[AuthProvider, IdentityProviderClient]) -> None:
        """Initialize auth service.

        Args:
            clients: Map of provider to client implementation
        """
        self.clients = clients

    async def verify(
        self, provider: AuthProvider, access_token: str
    ) -> ExternalIdentityClaim:
        """Verify an access token with its provider.

        Args:
            provider: Provider that issued the token
            access_token: OAuth access token

        Returns:
            Verified identity claim

        Raises:
            IdentityError: ``invalid_argument`` for an empty token or a
                provider account without email, ``unauthenticated`` when the
                provider rejects the token or cannot be reached
            ValueError: If provider not supported
        """
        if not access_token or not access_token.strip():
            raise IdentityError(
                IdentityErrorKind.INVALID_ARGUMENT, "Access token is required"
            )

        client = self.clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")

        with logfire.span("auth_service.verify", provider=provider.value):
            try:
                profile = await client.fetch_profile(access_token)
            except ProviderUnavailableError as e:
                logfire.warn(
                    "Provider verification failed", provider=provider.value, error=str(e)
                )
                raise IdentityError(
                    IdentityErrorKind.UNAUTHENTICATED,
                    f"Could not verify token with {provider.value}",
                ) from e

            if profile.result_code != NAVER_SUCCESS_CODE or not profile.provider_user_id:
                logfire.warn(
                    "Provider rejected access token",
                    provider=provider.value,
                    result_code=profile.result_code,
                    message=profile.message,
                )
                raise IdentityError(
                    IdentityErrorKind.UNAUTHENTICATED, "Invalid access token"
                )

            if not profile.email:
                logfire.warn(
                    "Provider account has no email",
                    provider=provider.value,
                    provider_user_id=profile.provider_user_id,
                )
                raise IdentityError(
                    IdentityErrorKind.INVALID_ARGUMENT,
                    "Email consent is required to use this service",
                )

            claim = ExternalIdentityClaim(
                provider=provider,
                external_uid=profile.provider_user_id,
                identity_key=derive_identity_key(provider, profile.provider_user_id),
                email=profile.email,
                display_name=profile.name or profile.nickname or "",
                avatar_url=profile.profile_image,
                raw_provider_payload=profile.raw,
            )
            logfire.info(
                "Access token verified",
                provider=provider.value,
                identity_key=claim.identity_key,
            )
            return claim
