"""Unit tests for AuthService."""

import pytest

from autoblog.adapter.naver import MockNaverClient
from autoblog.domain.error import IdentityError, IdentityErrorKind
from autoblog.domain.service import AuthService
from autoblog.domain.value import AuthProvider


@pytest.fixture
def naver_client() -> MockNaverClient:
    return MockNaverClient()


@pytest.fixture
def auth_service(naver_client) -> AuthService:
    return AuthService({AuthProvider.NAVER: naver_client})


class TestVerify:
    """Tests for AuthService.verify."""

    @pytest.mark.asyncio
    async def test_valid_token_yields_claim(self, auth_service, naver_client):
        naver_client.register(
            "token-a",
            provider_user_id="abc",
            email="a@naver.com",
            name="김철수",
            profile_image="https://phinf.pstatic.net/a.jpg",
        )

        claim = await auth_service.verify(AuthProvider.NAVER, "token-a")

        assert claim.identity_key == "naver:abc"
        assert claim.external_uid == "abc"
        assert claim.email == "a@naver.com"
        assert claim.display_name == "김철수"
        assert claim.avatar_url == "https://phinf.pstatic.net/a.jpg"

    @pytest.mark.asyncio
    async def test_nickname_is_used_without_name(self, auth_service, naver_client):
        naver_client.register("token-b", "b", "b@naver.com", nickname="삐")

        claim = await auth_service.verify(AuthProvider.NAVER, "token-b")

        assert claim.display_name == "삐"

    @pytest.mark.asyncio
    async def test_identity_key_is_stable_across_email_changes(
        self, auth_service, naver_client
    ):
        naver_client.register("old", "same-id", "old@naver.com")
        naver_client.register("new", "same-id", "new@naver.com")

        first = await auth_service.verify(AuthProvider.NAVER, "old")
        second = await auth_service.verify(AuthProvider.NAVER, "new")

        assert first.identity_key == second.identity_key

    @pytest.mark.asyncio
    async def test_rejected_token_is_unauthenticated(self, auth_service):
        with pytest.raises(IdentityError) as exc_info:
            await auth_service.verify(AuthProvider.NAVER, "unknown-token")

        assert exc_info.value.kind == IdentityErrorKind.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_provider_outage_is_unauthenticated(self, auth_service, naver_client):
        naver_client.unavailable = True

        with pytest.raises(IdentityError) as exc_info:
            await auth_service.verify(AuthProvider.NAVER, MockNaverClient.DEFAULT_TOKEN)

        assert exc_info.value.kind == IdentityErrorKind.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_missing_email_is_invalid_argument(self, auth_service, naver_client):
        naver_client.register("no-email", "c", None)

        with pytest.raises(IdentityError) as exc_info:
            await auth_service.verify(AuthProvider.NAVER, "no-email")

        assert exc_info.value.kind == IdentityErrorKind.INVALID_ARGUMENT

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "   "])
    async def test_empty_token_is_invalid_argument(self, auth_service, token):
        with pytest.raises(IdentityError) as exc_info:
            await auth_service.verify(AuthProvider.NAVER, token)

        assert exc_info.value.kind == IdentityErrorKind.INVALID_ARGUMENT
