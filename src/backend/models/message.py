"""
Constituent message model.

Read state only moves forward: a message starts unread and becomes read when
its recipient opens it or marks the whole inbox read.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from db.types import UTCDateTime, utc_now
from models.user import User


class Message(Base):
    """Direct message between two users."""

    __tablename__ = "messages"
    __table_args__ = (
        # Inbox listing and unread counts
        Index("ix_messages_recipient_created", "recipient_id", "created_at"),
        Index("ix_messages_recipient_read", "recipient_id", "read"),
        # Sent listing
        Index("ix_messages_sender_created", "sender_id", "created_at"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    subject: Mapped[str] = mapped_column(String(300))
    content: Mapped[str] = mapped_column(Text)

    sender_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
    )
    recipient_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
    )

    read: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, onupdate=utc_now)

    # Relationships
    sender: Mapped[User] = relationship(User, foreign_keys=[sender_id])
    recipient: Mapped[User] = relationship(User, foreign_keys=[recipient_id])

    def is_participant(self, user_id: str) -> bool:
        """Whether the user sent or received this message."""
        return user_id in (self.sender_id, self.recipient_id)

    def other_party(self, user_id: str) -> str:
        """ID of the participant who is not ``user_id``."""
        return self.recipient_id if self.sender_id == user_id else self.sender_id

    def __repr__(self) -> str:
        return f"<Message {self.id} read={self.read}>"
