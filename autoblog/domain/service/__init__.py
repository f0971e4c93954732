"""Domain services."""

from .auth_service import AuthService, IdentityProviderClient, ProviderProfile
from .base import Service
from .credit_ledger import CreditLedger, DebitReceipt
from .generation_guard import GenerationGuard
from .generation_service import (
    BLOG_RESPONSE_SCHEMA,
    GenerationApiClient,
    GenerationRequest,
    GenerationService,
    build_instructions,
    parse_generated_blog,
)
from .identity_service import IdentityService
from .jwt_service import CredentialRegistry, JWTService
from .message_service import MessageService
from .profile_service import ProfileService

__all__ = [
    "AuthService",
    "BLOG_RESPONSE_SCHEMA",
    "CreditLedger",
    "DebitReceipt",
    "CredentialRegistry",
    "GenerationApiClient",
    "GenerationGuard",
    "GenerationRequest",
    "GenerationService",
    "IdentityProviderClient",
    "IdentityService",
    "JWTService",
    "MessageService",
    "ProfileService",
    "ProviderProfile",
    "Service",
    "build_instructions",
    "parse_generated_blog",
]
