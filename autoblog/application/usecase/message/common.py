"""Message response model shared by the message use cases."""

from datetime import datetime

from pydantic import BaseModel

from autoblog.domain.model import SupportMessage
from autoblog.domain.value import MessageStatus


class MessageResponse(BaseModel):
    """Support message as returned to clients."""

    id: str
    user_id: str
    user_email: str
    subject: str
    content: str
    reply_content: str | None
    status: MessageStatus
    user_read: bool
    created_at: datetime
    replied_at: datetime | None

    @classmethod
    def from_message(cls, message: SupportMessage) -> "MessageResponse":
        return cls(
            id=str(message.id),
            user_id=message.user_id,
            user_email=message.user_email,
            subject=message.subject,
            content=message.content,
            reply_content=message.reply_content,
            status=message.status,
            user_read=message.user_read,
            created_at=message.created_at,
            replied_at=message.replied_at,
        )


class MessageListResponse(BaseModel):
    """List of messages, newest first."""

    messages: list[MessageResponse]
    unread_count: int = 0
