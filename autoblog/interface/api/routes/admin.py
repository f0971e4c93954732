"""Admin console routes.

Every route requires a session whose email is in the configured admin list;
the use cases enforce it.
"""

import logging
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from autoblog.application.usecase.admin import (
    GrantCreditsRequest,
    GrantCreditsResponse,
    GrantCreditsUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    SetUnlimitedRequest,
    SetUnlimitedResponse,
    SetUnlimitedUseCase,
)
from autoblog.application.usecase.auth import ResolveSessionUseCase
from autoblog.application.usecase.message import (
    ListAllMessagesUseCase,
    ListMessagesRequest,
    MessageListResponse,
    MessageResponse,
    ReplyMessageRequest,
    ReplyMessageUseCase,
)
from autoblog.interface.api.session import require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class GrantCreditsAPIRequest(BaseModel):
    amount: int = Field(gt=0, le=10000)


class SetUnlimitedAPIRequest(BaseModel):
    unlimited: bool


class ReplyMessageAPIRequest(BaseModel):
    reply_content: str = Field(min_length=1, max_length=5000)


@router.get("/profiles", response_model=ListProfilesResponse)
async def list_profiles(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListProfilesResponse:
    """List every profile, newest first."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await list_profiles_use_case.execute(ListProfilesRequest(session=session))


@router.post("/profiles/{user_id}/credits", response_model=GrantCreditsResponse)
async def grant_credits(
    user_id: str,
    request: GrantCreditsAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    grant_credits_use_case: FromDishka[GrantCreditsUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GrantCreditsResponse:
    """Add credits to a user's balance."""
    session = await require_session(auth_token, resolve_session_use_case)
    logger.info(f"Admin {session.email} grants {request.amount} credits to {user_id}")
    return await grant_credits_use_case.execute(
        GrantCreditsRequest(session=session, user_id=user_id, amount=request.amount)
    )


@router.put("/profiles/{user_id}/unlimited", response_model=SetUnlimitedResponse)
async def set_unlimited(
    user_id: str,
    request: SetUnlimitedAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    set_unlimited_use_case: FromDishka[SetUnlimitedUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SetUnlimitedResponse:
    """Turn unlimited generation on or off for a user."""
    session = await require_session(auth_token, resolve_session_use_case)
    logger.info(f"Admin {session.email} sets unlimited={request.unlimited} for {user_id}")
    return await set_unlimited_use_case.execute(
        SetUnlimitedRequest(
            session=session, user_id=user_id, unlimited=request.unlimited
        )
    )


@router.get("/messages", response_model=MessageListResponse)
async def list_all_messages(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    list_all_messages_use_case: FromDishka[ListAllMessagesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageListResponse:
    """List every support message; ``unread_count`` counts pending ones."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await list_all_messages_use_case.execute(
        ListMessagesRequest(session=session)
    )


@router.post("/messages/{message_id}/reply", response_model=MessageResponse)
async def reply_to_message(
    message_id: UUID,
    request: ReplyMessageAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    reply_message_use_case: FromDishka[ReplyMessageUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Answer a support message."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await reply_message_use_case.execute(
        ReplyMessageRequest(
            session=session,
            message_id=message_id,
            reply_content=request.reply_content,
        )
    )
