"""Blog generation routes."""

import logging
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from autoblog.application.usecase.auth import ResolveSessionUseCase
from autoblog.application.usecase.generation import (
    GenerateBlogRequest,
    GenerateBlogResponse,
    GenerateBlogUseCase,
)
from autoblog.domain.model import ContentBrief, PhotoPayload
from autoblog.interface.api.session import require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generations", tags=["generations"], route_class=DishkaRoute)


class GenerateBlogAPIRequest(BaseModel):
    """API request for generating a blog post."""

    brief: ContentBrief
    photos: list[PhotoPayload] = Field(default_factory=list)
    # Client-side wizard session; one generation may run per session
    wizard_session_id: Optional[str] = Field(default=None, max_length=128)


@router.post("", response_model=GenerateBlogResponse)
async def generate_blog(
    request: GenerateBlogAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    generate_blog_use_case: FromDishka[GenerateBlogUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GenerateBlogResponse:
    """Generate a blog post from a brief and photos.

    One credit is debited before the model is called and given back if the
    call fails.

    Errors:
        400 validation: Incomplete brief or unusable photos
        402 insufficient_credit: Balance does not cover the cost
        409 generation_in_progress: The wizard session already has a run
        502 generation_failed: The model call failed, see ``refunded``
    """
    session = await require_session(auth_token, resolve_session_use_case)
    logger.info(
        f"Generation requested by {session.user_id}: "
        f"type={request.brief.type}, photos={len(request.photos)}"
    )
    return await generate_blog_use_case.execute(
        GenerateBlogRequest(
            session=session,
            brief=request.brief,
            photos=request.photos,
            wizard_session_id=request.wizard_session_id,
        )
    )
