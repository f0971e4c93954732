"""List messages use cases."""

from pydantic import BaseModel

from autoblog.application.usecase.admin.access import require_admin
from autoblog.domain.service import MessageService
from autoblog.domain.value import MessageStatus, SessionContext

from .common import MessageListResponse, MessageResponse


class ListMessagesRequest(BaseModel):
    """List messages request."""

    session: SessionContext


class ListMyMessagesUseCase:
    """Use case for the caller's own messages."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ListMessagesRequest) -> MessageListResponse:
        messages = await self.message_service.list_for_user(request.session.user_id)
        return MessageListResponse(
            messages=[MessageResponse.from_message(m) for m in messages],
            unread_count=sum(1 for m in messages if not m.user_read),
        )


class ListAllMessagesUseCase:
    """Use case for the admin inbox."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ListMessagesRequest) -> MessageListResponse:
        require_admin(request.session, "list_messages")
        messages = await self.message_service.list_all()
        return MessageListResponse(
            messages=[MessageResponse.from_message(m) for m in messages],
            unread_count=sum(1 for m in messages if m.status == MessageStatus.PENDING),
        )
