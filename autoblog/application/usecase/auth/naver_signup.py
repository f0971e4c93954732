"""Naver signup use case."""

import logfire
from pydantic import BaseModel

from autoblog.config import Settings
from autoblog.domain.error import AlreadyExistsError, IdentityError, IdentityErrorKind
from autoblog.domain.service import AuthService, IdentityService, JWTService, ProfileService
from autoblog.domain.value import AuthProvider

from .bridge import IdentityBridgeResponse


class NaverSignupRequest(BaseModel):
    """Naver signup request."""

    access_token: str  # Token from the Naver Login SDK


class NaverSignupUseCase:
    """Use case for registering a new account from a Naver profile."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> None:
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.profile_service = profile_service
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: NaverSignupRequest) -> IdentityBridgeResponse:
        """Execute Naver signup.

        Steps:
        1. Verify the access token with Naver
        2. Refuse if a profile already exists for the identity key
        3. Create the identity record, unless an interrupted signup left one
        4. Create the profile with the signup credits
        5. Mint an exchange credential

        Raises:
            IdentityError: ``already_exists`` if the account or its email is
                already registered; verification kinds from the auth service
        """
        claim = await self.auth_service.verify(AuthProvider.NAVER, request.access_token)

        with logfire.span("naver_signup", identity_key=claim.identity_key):
            if await self.profile_service.find(claim.identity_key) is not None:
                logfire.info("Signup for existing account", identity_key=claim.identity_key)
                raise IdentityError(
                    IdentityErrorKind.ALREADY_EXISTS,
                    "This Naver account is already registered",
                )

            identity = await self.identity_service.find(claim.identity_key)
            if identity is None:
                try:
                    await self.identity_service.create_from_claim(claim)
                except AlreadyExistsError as e:
                    logfire.info(
                        "Signup email already registered",
                        identity_key=claim.identity_key,
                    )
                    raise IdentityError(
                        IdentityErrorKind.ALREADY_EXISTS,
                        "An account with this email already exists",
                    ) from e
            else:
                # Identity record without a profile: finish the earlier signup
                logfire.info(
                    "Completing interrupted signup", identity_key=claim.identity_key
                )

            try:
                await self.profile_service.create(
                    claim.identity_key,
                    claim.email,
                    credits=self.settings.auth.naver_signup_credits,
                    linked_provider_id=claim.external_uid,
                    email_verified_reward_granted=True,
                )
            except AlreadyExistsError as e:
                raise IdentityError(
                    IdentityErrorKind.ALREADY_EXISTS,
                    "This Naver account is already registered",
                ) from e

            credential = self.jwt_service.mint_exchange_credential(claim)
            logfire.info(
                "Naver signup succeeded",
                identity_key=claim.identity_key,
                credits=self.settings.auth.naver_signup_credits,
            )

            return IdentityBridgeResponse(
                credential=credential,
                identity_key=claim.identity_key,
                email=claim.email,
                display_name=claim.display_name,
                is_registered=True,
            )
