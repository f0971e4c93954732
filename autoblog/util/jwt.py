"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import uuid4

import jwt
from pydantic import BaseModel

from autoblog.config import AuthSettings


class TokenPurpose(str, Enum):
    """What a token may be used for."""

    # Short-lived credential returned by the identity bridge
    EXCHANGE = "exchange"
    # Long-lived session cookie
    SESSION = "session"


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Identity key
    purpose: TokenPurpose
    email: str | None = None
    provider: str | None = None
    email_verified: bool = False
    jti: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str,
    purpose: TokenPurpose,
    lifetime: timedelta,
    settings: AuthSettings,
    email: str | None = None,
    provider: str | None = None,
    email_verified: bool = False,
) -> tuple[str, TokenPayload]:
    """Create a signed token.

    Args:
        subject: Identity key the token asserts
        purpose: Exchange credential or session
        lifetime: Time until expiry
        settings: Authentication settings
        email: Email claim
        provider: Provider claim (e.g. ``naver.com``)
        email_verified: Whether the provider verified the email

    Returns:
        Encoded token and the payload it carries
    """
    payload = TokenPayload(
        sub=subject,
        purpose=purpose,
        email=email,
        provider=provider,
        email_verified=email_verified,
        jti=uuid4().hex,
        exp=datetime.now(timezone.utc) + lifetime,
    )

    token = jwt.encode(
        payload.model_dump(mode="json") | {"exp": payload.exp},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    return token, payload


def verify_token(
    token: str, purpose: TokenPurpose, settings: AuthSettings
) -> TokenPayload:
    """Verify and decode a token issued for ``purpose``.

    Args:
        token: JWT token to verify
        purpose: Expected purpose claim
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or issued for another purpose
    """
    try:
        decoded = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        payload = TokenPayload(**decoded)
    except ValueError:
        raise JWTError("Malformed token payload")

    if payload.purpose != purpose:
        raise JWTError(f"Token is not valid for {purpose.value}")

    return payload
