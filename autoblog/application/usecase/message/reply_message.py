"""Reply to message use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from autoblog.application.usecase.admin.access import require_admin
from autoblog.domain.service import MessageService
from autoblog.domain.value import MessageId, SessionContext

from .common import MessageResponse


class ReplyMessageRequest(BaseModel):
    """Reply message request."""

    session: SessionContext
    message_id: UUID
    reply_content: str = Field(min_length=1, max_length=5000)


class ReplyMessageUseCase:
    """Use case for an admin replying to a message."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ReplyMessageRequest) -> MessageResponse:
        """Store the reply and flag the message unread for its sender.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the message does not exist
        """
        require_admin(request.session, "reply_message")
        message = await self.message_service.reply(
            MessageId(request.message_id), request.reply_content.strip()
        )
        return MessageResponse.from_message(message)
