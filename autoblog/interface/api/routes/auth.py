"""Authentication routes.

The browser signs in with the Naver SDK and posts the resulting access
token to ``/auth/naver/login`` (or ``/auth/naver/signup``). Both return a
short-lived credential that ``/auth/exchange`` trades for the session
cookie.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel, Field

from autoblog.application.usecase.auth import (
    ExchangeCredentialRequest,
    ExchangeCredentialUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    IdentityBridgeResponse,
    NaverLoginRequest,
    NaverLoginUseCase,
    NaverSignupRequest,
    NaverSignupUseCase,
    ResolveSessionRequest,
    ResolveSessionUseCase,
)
from autoblog.config import Settings
from autoblog.domain.error import NotFoundError
from autoblog.interface.api.session import AUTH_COOKIE
from autoblog.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class NaverTokenRequest(BaseModel):
    """Access token obtained by the browser from Naver Login."""

    access_token: str = Field(max_length=4096)


class ExchangeRequest(BaseModel):
    """Credential returned by the identity bridge."""

    credential: str = Field(min_length=1, max_length=4096)


class ExchangeResponse(BaseModel):
    """Session started."""

    user_id: str
    email: str
    profile_created: bool


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _cookie_options(settings: Settings) -> dict:
    # Production serves the frontend from another site, which needs
    # SameSite=None and therefore Secure
    is_production = settings.environment == "production"
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "path": "/",
    }


@router.post("/naver/login", response_model=IdentityBridgeResponse)
async def naver_login(
    request: NaverTokenRequest,
    naver_login_use_case: FromDishka[NaverLoginUseCase],
) -> IdentityBridgeResponse:
    """Sign in an already registered Naver account.

    Errors:
        401 unauthenticated: Naver rejected the token
        400 invalid_argument: Missing token or no email consent
        404 not_registered: The account has no profile yet
    """
    logger.info("Naver login requested")
    return await naver_login_use_case.execute(
        NaverLoginRequest(access_token=request.access_token)
    )


@router.post("/naver/signup", response_model=IdentityBridgeResponse)
async def naver_signup(
    request: NaverTokenRequest,
    naver_signup_use_case: FromDishka[NaverSignupUseCase],
) -> IdentityBridgeResponse:
    """Register a Naver account.

    Errors:
        401 unauthenticated: Naver rejected the token
        400 invalid_argument: Missing token or no email consent
        409 already_exists: The account or its email is already registered
    """
    logger.info("Naver signup requested")
    return await naver_signup_use_case.execute(
        NaverSignupRequest(access_token=request.access_token)
    )


@router.post("/exchange", response_model=ExchangeResponse)
async def exchange_credential(
    request: ExchangeRequest,
    response: Response,
    exchange_use_case: FromDishka[ExchangeCredentialUseCase],
    settings: FromDishka[Settings],
) -> ExchangeResponse:
    """Trade a bridge credential for the session cookie.

    Each credential can be exchanged once.
    """
    result = await exchange_use_case.execute(
        ExchangeCredentialRequest(credential=request.credential)
    )

    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        max_age=settings.auth.session_expiry_days * 24 * 60 * 60,
        **_cookie_options(settings),
    )
    logger.info(f"Session cookie issued for {result.user_id}")

    return ExchangeResponse(
        user_id=result.user_id,
        email=result.email,
        profile_created=result.profile_created,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    options = _cookie_options(settings)
    response.delete_cookie(
        key=AUTH_COOKIE,
        path=options["path"],
        secure=options["secure"],
        httponly=options["httponly"],
        samesite=options["samesite"],
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a cookie: it answers ``authenticated=false``
    instead of raising.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        session = await resolve_session_use_case.execute(
            ResolveSessionRequest(token=auth_token)
        )
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(session=session)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except (JWTError, NotFoundError) as e:
        logger.info(f"Stale session cookie: {e}")
        return AuthStatusResponse(authenticated=False)
