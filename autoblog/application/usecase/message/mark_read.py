"""Mark message read use case."""

from uuid import UUID

from pydantic import BaseModel

from autoblog.domain.service import MessageService
from autoblog.domain.value import MessageId, SessionContext

from .common import MessageResponse


class MarkMessageReadRequest(BaseModel):
    """Mark message read request."""

    session: SessionContext
    message_id: UUID


class MarkMessageReadUseCase:
    """Use case for acknowledging a reply."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: MarkMessageReadRequest) -> MessageResponse:
        """Mark the caller's message read.

        Raises:
            NotFoundError: If the message does not exist
            NotAuthorizedError: If the message belongs to someone else
        """
        message = await self.message_service.mark_read(
            MessageId(request.message_id), request.session.user_id
        )
        return MessageResponse.from_message(message)
