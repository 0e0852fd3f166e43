"""
Message repository for database operations.
"""

from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from db.types import utc_now
from models.message import Message


class MessageRepository:
    """Repository for message database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _get_rowcount(self, result: Any) -> int:
        """Safely get rowcount from result."""
        return getattr(result, "rowcount", 0) or 0

    def _with_participants(self) -> Select:
        return select(Message).options(selectinload(Message.sender), selectinload(Message.recipient))

    async def create(self, sender_id: str, recipient_id: str, subject: str, content: str) -> Message:
        """Create a new unread message."""
        message = Message(
            id=str(uuid4()),
            sender_id=sender_id,
            recipient_id=recipient_id,
            subject=subject,
            content=content,
            read=False,
        )

        self.db.add(message)
        await self.db.flush()

        return await self.get_by_id(message.id)

    async def get_by_id(self, message_id: str, for_update: bool = False) -> Optional[Message]:
        """
        Get a message with sender and recipient loaded.

        With ``for_update`` the row is locked until the surrounding
        transaction ends.
        """
        query = self._with_participants().where(Message.id == message_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def list_for_recipient(self, user_id: str, page: int, limit: int) -> tuple[list[Message], int]:
        """List messages received by a user, newest first."""
        return await self._page(Message.recipient_id == user_id, page, limit)

    async def list_for_sender(self, user_id: str, page: int, limit: int) -> tuple[list[Message], int]:
        """List messages sent by a user, newest first."""
        return await self._page(Message.sender_id == user_id, page, limit)

    async def _page(self, condition, page: int, limit: int) -> tuple[list[Message], int]:
        # Get total count
        total_result = await self.db.execute(select(func.count(Message.id)).where(condition))
        total = total_result.scalar() or 0

        # Get paginated results
        query = (
            self._with_participants()
            .where(condition)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def count_unread(self, user_id: str) -> int:
        """Count unread messages received by a user."""
        result = await self.db.execute(
            select(func.count(Message.id)).where(
                Message.recipient_id == user_id,
                Message.read.is_(False),
            )
        )
        return result.scalar() or 0

    async def mark_read(self, message: Message) -> Message:
        """Mark a loaded message read."""
        message.read = True
        message.updated_at = utc_now()
        await self.db.flush()
        return message

    async def mark_all_read(self, user_id: str) -> int:
        """Mark every unread message received by a user read; returns the count changed."""
        result = await self.db.execute(
            update(Message)
            .where(
                Message.recipient_id == user_id,
                Message.read.is_(False),
            )
            .values(read=True, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        return self._get_rowcount(result)

    async def delete_for_participant(self, message_id: str, user_id: str) -> bool:
        """Delete a message if the user sent or received it."""
        result = await self.db.execute(
            select(Message)
            .where(
                Message.id == message_id,
                or_(Message.sender_id == user_id, Message.recipient_id == user_id),
            )
            .with_for_update()
        )
        message = result.scalar_one_or_none()
        if message is None:
            return False

        await self.db.delete(message)
        await self.db.flush()
        return True
