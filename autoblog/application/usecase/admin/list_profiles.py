"""List profiles use case."""

from pydantic import BaseModel

from autoblog.application.usecase.base import BaseUseCase
from autoblog.application.usecase.profile import ProfileResponse
from autoblog.domain.service import ProfileService
from autoblog.domain.value import SessionContext

from .access import require_admin


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    session: SessionContext


class ListProfilesResponse(BaseModel):
    """List profiles response."""

    profiles: list[ProfileResponse]


class ListProfilesUseCase(BaseUseCase):
    """Use case for the admin user list, newest first."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        require_admin(request.session, "list_profiles")
        profiles = await self.profile_service.list_all()
        return ListProfilesResponse(
            profiles=[ProfileResponse.from_profile(p) for p in profiles]
        )
