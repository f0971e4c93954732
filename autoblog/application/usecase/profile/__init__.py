"""Profile use cases."""

from .claim_email_reward import ClaimEmailRewardRequest, ClaimEmailRewardUseCase
from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .save_writing_styles import SaveWritingStylesRequest, SaveWritingStylesUseCase

__all__ = [
    "ClaimEmailRewardRequest",
    "ClaimEmailRewardUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "SaveWritingStylesRequest",
    "SaveWritingStylesUseCase",
]
