"""Test configuration and fixtures."""

import os

# Settings are read from the environment; pin them before autoblog is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTH__JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ADMIN__EMAILS"] = '["admin@autoblog.kr"]'
os.environ["OBSERVABILITY__SEND_TO_LOGFIRE"] = "false"

import base64  # noqa: E402

import logfire  # noqa: E402

from autoblog.domain.model import UserProfile  # noqa: E402
from autoblog.domain.repository import ProfileRepository  # noqa: E402
from autoblog.domain.value import SessionContext, UserId  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

ADMIN_EMAIL = "admin@autoblog.kr"

# Smallest valid JPEG-looking payload; only base64 validity is checked
PHOTO_DATA = base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg-bytes").decode()


def make_session(
    user_id: str = "naver:user1",
    email: str | None = "user1@naver.com",
    is_admin: bool = False,
) -> SessionContext:
    """Build the session context a verified cookie would produce."""
    return SessionContext(
        user_id=UserId(user_id),
        email=email,
        provider="naver.com",
        email_verified=True,
        is_admin=is_admin,
    )


async def seed_profile(
    profile_repository: ProfileRepository,
    user_id: str = "naver:user1",
    email: str = "user1@naver.com",
    credits: int = 5,
    unlimited: bool = False,
) -> UserProfile:
    """Insert a profile directly through the repository."""
    return await profile_repository.create(
        UserProfile(
            id=UserId(user_id),
            email=email,
            credit_balance=credits,
            unlimited=unlimited,
        )
    )
