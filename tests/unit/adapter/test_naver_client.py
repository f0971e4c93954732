"""Unit tests for the Naver profile API client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from autoblog.adapter.naver import RealNaverClient
from autoblog.domain.error import ProviderUnavailableError

USERINFO_URL = "https://openapi.naver.com/v1/nid/me"


def make_response(status_code: int, body=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = body
    return response


class TestRealNaverClient:
    @pytest.mark.asyncio
    async def test_fetches_profile(self):
        body = {
            "resultcode": "00",
            "message": "success",
            "response": {
                "id": "abc123",
                "email": "user@naver.com",
                "name": "홍길동",
                "profile_image": "https://phinf.pstatic.net/a.jpg",
            },
        }

        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=make_response(200, body))
            mock_client.return_value.__aenter__.return_value.get = get

            profile = await RealNaverClient(USERINFO_URL).fetch_profile("token")

        assert profile.result_code == "00"
        assert profile.provider_user_id == "abc123"
        assert profile.email == "user@naver.com"
        assert profile.name == "홍길동"
        get.assert_called_once_with(
            USERINFO_URL,
            headers={"Authorization": "Bearer token"},
            timeout=10.0,
        )

    @pytest.mark.asyncio
    async def test_rejected_token_is_not_an_exception(self):
        body = {"resultcode": "024", "message": "Authentication failed"}

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(401, body)
            )

            profile = await RealNaverClient(USERINFO_URL).fetch_profile("bad")

        assert profile.result_code == "024"
        assert profile.provider_user_id is None

    @pytest.mark.asyncio
    async def test_success_code_on_error_status_is_overridden(self):
        body = {"resultcode": "00", "response": {"id": "abc123"}}

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(403, body)
            )

            profile = await RealNaverClient(USERINFO_URL).fetch_profile("token")

        assert profile.result_code == "403"

    @pytest.mark.asyncio
    async def test_server_error_means_unavailable(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(503, text="maintenance")
            )

            with pytest.raises(ProviderUnavailableError):
                await RealNaverClient(USERINFO_URL).fetch_profile("token")

    @pytest.mark.asyncio
    async def test_connection_error_means_unavailable(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(ProviderUnavailableError):
                await RealNaverClient(USERINFO_URL).fetch_profile("token")

    @pytest.mark.asyncio
    async def test_non_json_body_means_unavailable(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200)
            )

            with pytest.raises(ProviderUnavailableError):
                await RealNaverClient(USERINFO_URL).fetch_profile("token")
