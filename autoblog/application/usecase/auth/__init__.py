"""Authentication use cases."""

from .bridge import IdentityBridgeResponse
from .exchange_credential import (
    ExchangeCredentialRequest,
    ExchangeCredentialResponse,
    ExchangeCredentialUseCase,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .naver_login import NaverLoginRequest, NaverLoginUseCase
from .naver_signup import NaverSignupRequest, NaverSignupUseCase
from .resolve_session import ResolveSessionRequest, ResolveSessionUseCase

__all__ = [
    "ExchangeCredentialRequest",
    "ExchangeCredentialResponse",
    "ExchangeCredentialUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "IdentityBridgeResponse",
    "NaverLoginRequest",
    "NaverLoginUseCase",
    "NaverSignupRequest",
    "NaverSignupUseCase",
    "ResolveSessionRequest",
    "ResolveSessionUseCase",
]
