"""Send message use case."""

from pydantic import BaseModel, Field

from autoblog.domain.error import ValidationError
from autoblog.domain.service import MessageService
from autoblog.domain.value import SessionContext

from .common import MessageResponse


class SendMessageRequest(BaseModel):
    """Send message request."""

    session: SessionContext
    subject: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)


class SendMessageUseCase:
    """Use case for sending a message to the admins."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> MessageResponse:
        """Store a new pending message.

        Raises:
            ValidationError: If the session has no email to reply to
        """
        if not request.session.email:
            raise ValidationError("An email address is required to send messages")

        message = await self.message_service.send(
            request.session.user_id,
            request.session.email,
            request.subject.strip(),
            request.content.strip(),
        )
        return MessageResponse.from_message(message)
