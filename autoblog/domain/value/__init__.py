"""Domain value objects for AutoBlog."""

from autoblog.domain.value.identifiers import MessageId, UserId
from autoblog.domain.value.types import (
    PROVIDER_CLAIMS,
    AuthProvider,
    ExternalIdentityClaim,
    MessageStatus,
    SectionType,
    SessionContext,
    derive_identity_key,
)

__all__ = [
    # Identifiers
    "UserId",
    "MessageId",
    # Types
    "AuthProvider",
    "ExternalIdentityClaim",
    "MessageStatus",
    "PROVIDER_CLAIMS",
    "SectionType",
    "SessionContext",
    "derive_identity_key",
]
