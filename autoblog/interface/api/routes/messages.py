"""Support message routes for the signed-in user."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from autoblog.application.usecase.auth import ResolveSessionUseCase
from autoblog.application.usecase.message import (
    ListMessagesRequest,
    ListMyMessagesUseCase,
    MarkMessageReadRequest,
    MarkMessageReadUseCase,
    MessageListResponse,
    MessageResponse,
    SendMessageRequest,
    SendMessageUseCase,
)
from autoblog.interface.api.session import require_session

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    """API request for contacting support."""

    subject: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: SendMessageAPIRequest,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    send_message_use_case: FromDishka[SendMessageUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Send a message to the operators."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await send_message_use_case.execute(
        SendMessageRequest(
            session=session, subject=request.subject, content=request.content
        )
    )


@router.get("", response_model=MessageListResponse)
async def list_my_messages(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    list_messages_use_case: FromDishka[ListMyMessagesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageListResponse:
    """List the caller's messages, newest first, with the unread reply count."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await list_messages_use_case.execute(ListMessagesRequest(session=session))


@router.post("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(
    message_id: UUID,
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    mark_read_use_case: FromDishka[MarkMessageReadUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Mark a replied message as read."""
    session = await require_session(auth_token, resolve_session_use_case)
    return await mark_read_use_case.execute(
        MarkMessageReadRequest(session=session, message_id=message_id)
    )
