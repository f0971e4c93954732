"""Mock Gemini providers for testing."""

from dishka import Scope, provide

from autoblog.adapter.gemini import GeminiClient, MockGeminiClient
from autoblog.util.di.infrastructure.gemini import GeminiProvider


class MockGeminiProvider(GeminiProvider):
    """Mock Gemini provider using the scripted client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_gemini_client(self) -> GeminiClient:
        """Provide mock Gemini client."""
        return MockGeminiClient()
