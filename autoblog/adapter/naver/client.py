"""Naver profile API client.

The browser completes Naver Login (네아로) and hands the access token to the
API; the token is verified by looking up the profile it was issued for.
"""

from typing import Any, Optional

import httpx
import logfire

from autoblog.domain.error import ProviderUnavailableError
from autoblog.domain.service.auth_service import IdentityProviderClient, ProviderProfile

# Result code Naver uses for a rejected token
INVALID_TOKEN_CODE = "024"


class NaverClient(IdentityProviderClient):
    """Base class for Naver clients.

    Provides type distinction for dependency injection.
    """

    pass


def _to_profile(body: dict[str, Any]) -> ProviderProfile:
    response = body.get("response") or {}
    return ProviderProfile(
        result_code=str(body.get("resultcode", "")),
        message=str(body.get("message", "")),
        provider_user_id=response.get("id"),
        email=response.get("email"),
        name=response.get("name"),
        nickname=response.get("nickname"),
        profile_image=response.get("profile_image"),
        raw=response,
    )


class RealNaverClient(NaverClient):
    """Client for ``GET /v1/nid/me``."""

    def __init__(self, userinfo_url: str, timeout_seconds: float = 10.0) -> None:
        """Initialize Naver client.

        Args:
            userinfo_url: Profile endpoint
            timeout_seconds: Request timeout
        """
        self.userinfo_url = userinfo_url
        self.timeout_seconds = timeout_seconds

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        """Look up the Naver account behind an access token.

        Args:
            access_token: Naver OAuth access token

        Returns:
            Profile with Naver's result code; a rejected token yields a
            non-success code rather than an exception

        Raises:
            ProviderUnavailableError: If Naver could not be reached or answered
                with something other than its JSON envelope
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Naver profile request failed", error=str(e))
            raise ProviderUnavailableError("naver", f"HTTP error fetching profile: {e}")

        if response.status_code >= 500:
            logfire.error(
                "Naver profile API error",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderUnavailableError(
                "naver", f"Profile request failed: {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError:
            logfire.error(
                "Naver profile response is not JSON", status_code=response.status_code
            )
            raise ProviderUnavailableError("naver", "Malformed profile response")

        profile = _to_profile(body if isinstance(body, dict) else {})
        if response.status_code != 200 and profile.result_code == "00":
            # Never trust a success code on an error status
            profile = profile.model_copy(update={"result_code": str(response.status_code)})

        logfire.info(
            "Naver profile fetched",
            status_code=response.status_code,
            result_code=profile.result_code,
        )
        return profile


class MockNaverClient(NaverClient):
    """Mock Naver client for testing.

    Access tokens map to canned accounts; unknown tokens are rejected the
    way Naver rejects them.
    """

    DEFAULT_TOKEN = "mock-naver-token"

    def __init__(self) -> None:
        self.accounts: dict[str, dict[str, Any]] = {}
        self.unavailable = False
        self.register(
            self.DEFAULT_TOKEN,
            provider_user_id="mocknaver123",
            email="mock@naver.com",
            name="네이버 사용자",
        )

    def register(
        self,
        access_token: str,
        provider_user_id: str,
        email: Optional[str],
        name: Optional[str] = None,
        nickname: Optional[str] = None,
        profile_image: Optional[str] = None,
    ) -> None:
        """Make ``access_token`` resolve to an account."""
        account: dict[str, Any] = {"id": provider_user_id}
        for key, value in (
            ("email", email),
            ("name", name),
            ("nickname", nickname),
            ("profile_image", profile_image),
        ):
            if value is not None:
                account[key] = value
        self.accounts[access_token] = account

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        if self.unavailable:
            raise ProviderUnavailableError("naver", "Mock provider is down")

        account = self.accounts.get(access_token)
        if account is None:
            return _to_profile(
                {"resultcode": INVALID_TOKEN_CODE, "message": "Authentication failed"}
            )
        return _to_profile({"resultcode": "00", "message": "success", "response": account})
