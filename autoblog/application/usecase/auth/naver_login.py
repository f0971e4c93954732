"""Naver login use case."""

import logfire
from pydantic import BaseModel

from autoblog.domain.error import AlreadyExistsError, IdentityError, IdentityErrorKind
from autoblog.domain.service import AuthService, IdentityService, JWTService, ProfileService
from autoblog.domain.value import AuthProvider, ExternalIdentityClaim

from .bridge import IdentityBridgeResponse


class NaverLoginRequest(BaseModel):
    """Naver login request."""

    access_token: str  # Token from the Naver Login SDK


class NaverLoginUseCase:
    """Use case for signing in an already registered Naver account."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize Naver login use case.

        Args:
            auth_service: Provider verification service
            identity_service: Backing identity records
            profile_service: Profile service
            jwt_service: Credential minting
        """
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.profile_service = profile_service
        self.jwt_service = jwt_service

    async def execute(self, request: NaverLoginRequest) -> IdentityBridgeResponse:
        """Execute Naver login.

        Steps:
        1. Verify the access token with Naver
        2. Require an existing profile for the identity key
        3. Refresh the backing identity record
        4. Mint an exchange credential

        Raises:
            IdentityError: ``not_registered`` if no profile exists for the
                account; verification kinds from the auth service
        """
        claim = await self.auth_service.verify(AuthProvider.NAVER, request.access_token)

        with logfire.span("naver_login", identity_key=claim.identity_key):
            profile = await self.profile_service.find(claim.identity_key)
            if profile is None:
                logfire.info("Login for unregistered account", identity_key=claim.identity_key)
                raise IdentityError(
                    IdentityErrorKind.NOT_REGISTERED,
                    "No account is registered for this Naver profile",
                )

            await self._refresh_identity(claim)

            credential = self.jwt_service.mint_exchange_credential(claim)
            logfire.info("Naver login succeeded", identity_key=claim.identity_key)

            return IdentityBridgeResponse(
                credential=credential,
                identity_key=claim.identity_key,
                email=claim.email,
                display_name=claim.display_name,
                is_registered=True,
            )

    async def _refresh_identity(self, claim: ExternalIdentityClaim) -> None:
        """Bring the identity record in line with the provider's data.

        A conflicting email is left stale rather than failing the login.
        """
        try:
            identity = await self.identity_service.find(claim.identity_key)
            if identity is None:
                await self.identity_service.create_from_claim(claim)
            else:
                await self.identity_service.record_login(identity, claim)
        except AlreadyExistsError as e:
            logfire.warn(
                "Identity record not refreshed, email belongs to another account",
                identity_key=claim.identity_key,
                error=str(e),
            )
