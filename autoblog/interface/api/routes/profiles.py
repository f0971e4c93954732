"""Profile routes for the signed-in user."""

import asyncio
import logging
from collections.abc import AsyncIterator

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from autoblog.application.usecase.auth import ResolveSessionUseCase
from autoblog.application.usecase.profile import (
    ClaimEmailRewardRequest,
    ClaimEmailRewardUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    SaveWritingStylesRequest,
    SaveWritingStylesUseCase,
)
from autoblog.domain.event import ProfileChanged, ProfileSubscription
from autoblog.domain.model import WritingStyle
from autoblog.domain.service import ProfileService
from autoblog.interface.api.session import require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)

# Seconds between keep-alive comments on an idle event stream
KEEPALIVE_SECONDS = 15.0


class SaveWritingStylesAPIRequest(BaseModel):
    """Full replacement list of saved writing styles."""

    styles: list[WritingStyle] = Field(max_length=20)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    get_profile_use_case: FromDishka[GetProfileUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Get the caller's profile, including the credit balance."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await get_profile_use_case.execute(GetProfileRequest(session=session))


@router.put("/me/writing-styles", response_model=ProfileResponse)
async def save_writing_styles(
    request: SaveWritingStylesAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    save_writing_styles_use_case: FromDishka[SaveWritingStylesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Replace the caller's saved writing styles."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await save_writing_styles_use_case.execute(
        SaveWritingStylesRequest(session=session, styles=request.styles)
    )


@router.post("/me/email-verified-reward", response_model=ProfileResponse)
async def claim_email_verified_reward(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    claim_email_reward_use_case: FromDishka[ClaimEmailRewardUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Grant the one-time email verification reward.

    Calling it again after the reward was granted leaves the balance as is.
    """
    session = await require_session(auth_token, resolve_session_use_case)
    return await claim_email_reward_use_case.execute(
        ClaimEmailRewardRequest(session=session)
    )


def _format_event(event: ProfileChanged) -> str:
    body = ProfileResponse.from_profile(event.profile).model_dump_json()
    return f"id: {event.revision}\nevent: profile\ndata: {body}\n\n"


async def _stream_profile(
    request: Request, subscription: ProfileSubscription
) -> AsyncIterator[str]:
    try:
        for event in subscription.pending():
            yield _format_event(event)
        while not await request.is_disconnected():
            try:
                event = await asyncio.wait_for(subscription.next(), KEEPALIVE_SECONDS)
            except asyncio.TimeoutError:
                yield ": keep-alive\n\n"
                continue
            yield _format_event(event)
    finally:
        subscription.close()
        logger.info(f"Profile stream closed for {subscription.user_id}")


@router.get("/me/events")
async def stream_profile_events(
    request: Request,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    profile_service: FromDishka[ProfileService],
    auth_token: str | None = Cookie(default=None),
) -> StreamingResponse:
    """Stream the caller's profile as server-sent events.

    The current state is sent first, then every committed change. Revisions
    on the stream only ever increase.
    """
    session = await require_session(auth_token, resolve_session_use_case)

    # Subscribe before reading so no write between the two is lost
    subscription = profile_service.subscribe(session.user_id)
    try:
        profile = await profile_service.get(session.user_id)
    except Exception:
        subscription.close()
        raise
    subscription.offer(ProfileChanged(profile=profile))

    logger.info(f"Profile stream opened for {session.user_id}")
    return StreamingResponse(
        _stream_profile(request, subscription),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
