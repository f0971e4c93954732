"""PostgreSQL implementation of the Message repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from autoblog.domain.model import SupportMessage
from autoblog.domain.repository import MessageRepository
from autoblog.domain.value import MessageId, UserId
from autoblog.persistence.mappers import message_to_dict, row_to_message
from autoblog.persistence.tables import support_messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, message_id: MessageId) -> Optional[SupportMessage]:
        stmt = select(support_messages_table).where(
            support_messages_table.c.id == message_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_message(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[SupportMessage]:
        stmt = (
            select(support_messages_table)
            .where(support_messages_table.c.user_id == user_id)
            .order_by(support_messages_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def list_all(self) -> list[SupportMessage]:
        stmt = select(support_messages_table).order_by(
            support_messages_table.c.created_at.desc()
        )
        result = await self.session.execute(stmt)
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def save(self, message: SupportMessage) -> SupportMessage:
        """Save a message (create or update)."""
        message_dict = message_to_dict(message)

        existing = await self.find_by_id(message.id)
        if existing:
            stmt = (
                support_messages_table.update()
                .where(support_messages_table.c.id == message.id)
                .values(**message_dict)
            )
        else:
            stmt = support_messages_table.insert().values(**message_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return message
