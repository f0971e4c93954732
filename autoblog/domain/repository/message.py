"""Support message repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from autoblog.domain.model.message import SupportMessage
from autoblog.domain.value import MessageId, UserId


class MessageRepository(ABC):
    """Repository for support messages."""

    @abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Optional[SupportMessage]:
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[SupportMessage]:
        """List a user's messages, newest first."""
        pass

    @abstractmethod
    async def list_all(self) -> list[SupportMessage]:
        """List every message, newest first."""
        pass

    @abstractmethod
    async def save(self, message: SupportMessage) -> SupportMessage:
        """Save a message (create or update)."""
        pass
