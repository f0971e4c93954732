"""Save writing styles use case."""

from pydantic import BaseModel, Field

from autoblog.domain.error import ValidationError
from autoblog.domain.model import WritingStyle
from autoblog.domain.service import ProfileService
from autoblog.domain.value import SessionContext

from .get_profile import ProfileResponse


class SaveWritingStylesRequest(BaseModel):
    """Save writing styles request."""

    session: SessionContext
    styles: list[WritingStyle] = Field(max_length=20)


class SaveWritingStylesUseCase:
    """Use case for replacing the caller's saved writing styles."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: SaveWritingStylesRequest) -> ProfileResponse:
        """Replace the list of writing styles.

        Raises:
            ValidationError: If two styles share an id
            NotFoundError: If the profile does not exist
        """
        ids = [style.id for style in request.styles]
        if len(ids) != len(set(ids)):
            raise ValidationError("Writing style ids must be unique")

        profile = await self.profile_service.save_writing_styles(
            request.session.user_id, request.styles
        )
        return ProfileResponse.from_profile(profile)
