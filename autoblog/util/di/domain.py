"""Domain layer DI providers."""

from dishka import Scope, provide

from autoblog.config import AuthSettings, Settings
from autoblog.domain.repository import (
    AuthIdentityRepository,
    MessageRepository,
    ProfileRepository,
)
from autoblog.domain.service import (
    AuthService,
    CredentialRegistry,
    CreditLedger,
    GenerationApiClient,
    GenerationService,
    IdentityProviderClient,
    IdentityService,
    JWTService,
    MessageService,
    ProfileService,
)
from autoblog.domain.value import AuthProvider
from autoblog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, clients: dict[AuthProvider, IdentityProviderClient]
    ) -> AuthService:
        """Provide identity provider verification service."""
        return AuthService(clients=clients)

    @provide
    def get_jwt_service(
        self, auth_settings: AuthSettings, credential_registry: CredentialRegistry
    ) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(
            auth_settings=auth_settings, credential_registry=credential_registry
        )

    @provide
    def get_credit_ledger(
        self, profile_repository: ProfileRepository, settings: Settings
    ) -> CreditLedger:
        """Provide credit ledger."""
        return CreditLedger(
            profile_repository=profile_repository,
            max_attempts=settings.credits.max_write_attempts,
        )

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_identity_service(
        self, identity_repository: AuthIdentityRepository
    ) -> IdentityService:
        """Provide auth identity domain service."""
        return IdentityService(identity_repository=identity_repository)

    @provide
    def get_generation_service(self, client: GenerationApiClient) -> GenerationService:
        """Provide blog generation domain service."""
        return GenerationService(client=client)

    @provide
    def get_message_service(self, message_repository: MessageRepository) -> MessageService:
        """Provide support message domain service."""
        return MessageService(message_repository=message_repository)
