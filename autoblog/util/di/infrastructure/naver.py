"""Naver infrastructure providers."""

from dishka import Scope, provide

from autoblog.adapter.naver.client import NaverClient, RealNaverClient
from autoblog.config import Settings
from autoblog.util.di.base import ProviderBase


class NaverProvider(ProviderBase):
    """Naver component base."""

    __mock_component__ = "naver"


class ProdNaverProvider(NaverProvider):
    """Production Naver provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_naver_client(self, settings: Settings) -> NaverClient:
        """Provide Naver profile API client."""
        return RealNaverClient(
            userinfo_url=settings.naver.userinfo_url,
            timeout_seconds=settings.naver.timeout_seconds,
        )
