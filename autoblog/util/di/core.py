"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from autoblog.config import AuthSettings, GenerationSettings, Settings
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.service import CredentialRegistry, GenerationGuard
from autoblog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_generation_settings(self, settings: Settings) -> GenerationSettings:
        """Provide generation settings."""
        return settings.generation


class ProdStateProvider(ProviderBase):
    """Process-wide state shared by every request."""

    scope = Scope.APP

    @provide
    def get_profile_change_feed(self) -> ProfileChangeFeed:
        """Provide the profile change feed."""
        return ProfileChangeFeed()

    @provide
    def get_credential_registry(self) -> CredentialRegistry:
        """Provide the registry of redeemed exchange credentials."""
        return CredentialRegistry()

    @provide
    def get_generation_guard(self) -> GenerationGuard:
        """Provide the in-flight generation guard."""
        return GenerationGuard()
