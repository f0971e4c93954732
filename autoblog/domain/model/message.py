"""Support message entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from autoblog.domain.model.common import DomainModel
from autoblog.domain.value import MessageId, MessageStatus, UserId


class SupportMessage(DomainModel):
    """Message from a user to the admins, with an optional reply.

    ``user_read`` is false only while a reply is waiting to be seen.
    """

    id: MessageId
    user_id: UserId
    user_email: str
    subject: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    reply_content: Optional[str] = None
    status: MessageStatus = MessageStatus.PENDING
    user_read: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    replied_at: Optional[datetime] = None
