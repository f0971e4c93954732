"""Admin use cases."""

from .access import require_admin
from .grant_credits import GrantCreditsRequest, GrantCreditsResponse, GrantCreditsUseCase
from .list_profiles import ListProfilesRequest, ListProfilesResponse, ListProfilesUseCase
from .set_unlimited import SetUnlimitedRequest, SetUnlimitedResponse, SetUnlimitedUseCase

__all__ = [
    "GrantCreditsRequest",
    "GrantCreditsResponse",
    "GrantCreditsUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "SetUnlimitedRequest",
    "SetUnlimitedResponse",
    "SetUnlimitedUseCase",
    "require_admin",
]
