"""Provider that exposes adapter clients through their domain interfaces."""

from dishka import Scope, provide

from autoblog.adapter.gemini.client import GeminiClient
from autoblog.adapter.naver.client import NaverClient
from autoblog.domain.service import GenerationApiClient, IdentityProviderClient
from autoblog.domain.value import AuthProvider
from autoblog.util.di.base import ProviderBase


class ClientAggregatorProvider(ProviderBase):
    """Maps concrete adapter clients onto the interfaces domain services use."""

    scope = Scope.APP

    @provide
    def get_identity_provider_clients(
        self, naver_client: NaverClient
    ) -> dict[AuthProvider, IdentityProviderClient]:
        """Provide identity provider clients by provider."""
        return {AuthProvider.NAVER: naver_client}

    @provide
    def get_generation_api_client(self, gemini_client: GeminiClient) -> GenerationApiClient:
        """Provide the generation API client."""
        return gemini_client
