"""Mock Naver providers for testing."""

from dishka import Scope, provide

from autoblog.adapter.naver import MockNaverClient, NaverClient
from autoblog.util.di.infrastructure.naver import NaverProvider


class MockNaverProvider(NaverProvider):
    """Mock Naver provider using the canned-account client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_naver_client(self) -> NaverClient:
        """Provide mock Naver client."""
        return MockNaverClient()
