"""In-memory message repository for testing."""

from typing import Optional

from autoblog.domain.model import SupportMessage
from autoblog.domain.repository import MessageRepository
from autoblog.domain.value import MessageId, UserId


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: dict[MessageId, SupportMessage] = {}

    async def find_by_id(self, message_id: MessageId) -> Optional[SupportMessage]:
        return self._messages.get(message_id)

    async def find_by_user(self, user_id: UserId) -> list[SupportMessage]:
        return sorted(
            (m for m in self._messages.values() if m.user_id == user_id),
            key=lambda m: m.created_at,
            reverse=True,
        )

    async def list_all(self) -> list[SupportMessage]:
        return sorted(self._messages.values(), key=lambda m: m.created_at, reverse=True)

    async def save(self, message: SupportMessage) -> SupportMessage:
        self._messages[message.id] = message
        return message
