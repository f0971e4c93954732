"""Gemini infrastructure providers."""

from dishka import Scope, provide

from autoblog.adapter.gemini.client import GeminiClient, RealGeminiClient
from autoblog.config import GenerationSettings
from autoblog.util.di.base import ProviderBase
from autoblog.util.error import ConfigurationError


class GeminiProvider(ProviderBase):
    """Gemini component base."""

    __mock_component__ = "gemini"


class ProdGeminiProvider(GeminiProvider):
    """Production Gemini provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_gemini_client(self, settings: GenerationSettings) -> GeminiClient:
        """Provide Gemini client.

        Raises:
            ConfigurationError: If no Gemini API key is configured
        """
        if not settings.gemini_api_key:
            raise ConfigurationError("GENERATION__GEMINI_API_KEY must be configured")

        return RealGeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.model,
            temperature=settings.temperature,
            use_search_grounding=settings.use_search_grounding,
        )
