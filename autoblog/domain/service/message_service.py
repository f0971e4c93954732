"""Support message domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from autoblog.domain.error import NotAuthorizedError, NotFoundError
from autoblog.domain.model import SupportMessage
from autoblog.domain.repository import MessageRepository
from autoblog.domain.value import MessageId, MessageStatus, UserId

from .base import Service


class MessageService(Service):
    """Domain service for user to admin messages."""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def send(
        self, user_id: UserId, user_email: str, subject: str, content: str
    ) -> SupportMessage:
        """Send a new message to the admins.

        Args:
            user_id: Sender identity key
            user_email: Sender email shown to admins
            subject: Subject line
            content: Message body

        Returns:
            Stored message, pending and marked read for the sender
        """
        with logfire.span("message_service.send", user_id=user_id):
            message = SupportMessage(
                id=MessageId(uuid4()),
                user_id=user_id,
                user_email=user_email,
                subject=subject,
                content=content,
            )
            saved = await self.message_repository.save(message)
            logfire.info("Message sent", user_id=user_id, message_id=str(saved.id))
            return saved

    async def get(self, message_id: MessageId) -> SupportMessage:
        """Get a message.

        Raises:
            NotFoundError: If the message does not exist
        """
        message = await self.message_repository.find_by_id(message_id)
        if message is None:
            logfire.warn("Message not found", message_id=str(message_id))
            raise NotFoundError("Message", str(message_id))
        return message

    async def list_for_user(self, user_id: UserId) -> list[SupportMessage]:
        """A user's messages, newest first."""
        return await self.message_repository.find_by_user(user_id)

    async def list_all(self) -> list[SupportMessage]:
        """Every message, newest first."""
        return await self.message_repository.list_all()

    async def reply(self, message_id: MessageId, reply_content: str) -> SupportMessage:
        """Answer a message.

        The reply flags the message unread so the sender gets notified.
        """
        with logfire.span("message_service.reply", message_id=str(message_id)):
            message = await self.get(message_id)
            replied = message.model_copy(
                update={
                    "reply_content": reply_content,
                    "status": MessageStatus.REPLIED,
                    "user_read": False,
                    "replied_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.message_repository.save(replied)
            logfire.info(
                "Message replied", message_id=str(message_id), user_id=message.user_id
            )
            return saved

    async def mark_read(self, message_id: MessageId, user_id: UserId) -> SupportMessage:
        """Mark a reply as seen by its recipient.

        Raises:
            NotFoundError: If the message does not exist
            NotAuthorizedError: If the message belongs to someone else
        """
        with logfire.span("message_service.mark_read", message_id=str(message_id)):
            message = await self.get(message_id)
            if message.user_id != user_id:
                raise NotAuthorizedError("Message", str(message_id), user_id)
            if message.user_read:
                return message
            return await self.message_repository.save(
                message.model_copy(update={"user_read": True})
            )
