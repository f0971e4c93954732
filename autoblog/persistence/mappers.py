"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict
from uuid import UUID

from autoblog.domain.model import AuthIdentity, SupportMessage, UserProfile, WritingStyle
from autoblog.domain.value import AuthProvider, MessageId, MessageStatus, UserId


def row_to_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model."""
    return UserProfile(
        id=UserId(row["id"]),
        email=row["email"],
        credit_balance=row["credit_balance"],
        unlimited=row["unlimited"],
        email_verified_reward_granted=row["email_verified_reward_granted"],
        writing_styles=[
            WritingStyle.model_validate(style) for style in row["writing_styles"] or []
        ],
        linked_provider_id=row.get("linked_provider_id"),
        revision=row["revision"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: UserProfile) -> Dict[str, Any]:
    """Convert UserProfile to a dict suitable for insert/update.

    Writing styles are stored as a JSONB array of plain objects.
    """
    data = profile.model_dump()
    data["writing_styles"] = [
        style.model_dump(mode="json") for style in profile.writing_styles
    ]
    return data


def row_to_identity(row: Dict[str, Any]) -> AuthIdentity:
    """Convert database row to AuthIdentity domain model."""
    return AuthIdentity(
        identity_key=UserId(row["identity_key"]),
        provider=AuthProvider(row["provider"]),
        provider_user_id=row["provider_user_id"],
        email=row["email"],
        email_verified=row["email_verified"],
        display_name=row["display_name"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row.get("last_login_at"),
    )


def identity_to_dict(identity: AuthIdentity) -> Dict[str, Any]:
    data = identity.model_dump()
    data["provider"] = identity.provider.value
    return data


def row_to_message(row: Dict[str, Any]) -> SupportMessage:
    """Convert database row to SupportMessage domain model."""
    return SupportMessage(
        id=MessageId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        user_id=UserId(row["user_id"]),
        user_email=row["user_email"],
        subject=row["subject"],
        content=row["content"],
        reply_content=row.get("reply_content"),
        status=MessageStatus(row["status"]),
        user_read=row["user_read"],
        created_at=row["created_at"],
        replied_at=row.get("replied_at"),
    )


def message_to_dict(message: SupportMessage) -> Dict[str, Any]:
    data = message.model_dump()
    data["status"] = message.status.value
    return data
