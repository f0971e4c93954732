"""Exchange credential use case."""

import logfire
from pydantic import BaseModel

from autoblog.config import Settings
from autoblog.domain.service import JWTService, ProfileService
from autoblog.domain.value import UserId
from autoblog.util.jwt import JWTError


class ExchangeCredentialRequest(BaseModel):
    """Exchange credential request."""

    credential: str


class ExchangeCredentialResponse(BaseModel):
    """Exchange credential response."""

    token: str  # Session token, set as cookie by the route
    user_id: str
    email: str
    profile_created: bool


class ExchangeCredentialUseCase:
    """Use case for trading a bridge credential for a session."""

    def __init__(
        self,
        jwt_service: JWTService,
        profile_service: ProfileService,
        settings: Settings,
    ) -> None:
        self.jwt_service = jwt_service
        self.profile_service = profile_service
        self.settings = settings

    async def execute(
        self, request: ExchangeCredentialRequest
    ) -> ExchangeCredentialResponse:
        """Redeem a credential.

        On first authentication the profile is created with the default
        signup credits.

        Raises:
            JWTError: If the credential is invalid, expired, or already used
        """
        payload = self.jwt_service.redeem_exchange_credential(request.credential)
        if not payload.email:
            raise JWTError("Credential carries no email")

        user_id = UserId(payload.sub)
        with logfire.span("exchange_credential", user_id=user_id):
            _, created = await self.profile_service.ensure(
                user_id, payload.email, self.settings.credits.default_signup_credits
            )

            token = self.jwt_service.create_session_token(
                user_id,
                email=payload.email,
                provider=payload.provider,
                email_verified=payload.email_verified,
            )
            logfire.info("Session started", user_id=user_id, profile_created=created)

            return ExchangeCredentialResponse(
                token=token,
                user_id=user_id,
                email=payload.email,
                profile_created=created,
            )
