"""
Message-related Pydantic schemas.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from schemas.user import UserIdentity


class MailboxEnum(str, Enum):
    """Which side of the conversation to list."""

    INBOX = "inbox"
    SENT = "sent"


class MessageCreate(BaseModel):
    """Schema for sending a message."""

    recipient_id: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)


class MessageReply(BaseModel):
    """Schema for replying to a message."""

    content: str = Field(..., min_length=1)


class Message(BaseModel):
    """Message with both participants' identities."""

    id: str
    subject: str
    content: str
    sender_id: str
    sender: UserIdentity
    recipient_id: str
    recipient: UserIdentity
    read: bool
    created_at: datetime
    updated_at: datetime


class MessagePage(BaseModel):
    """One page of a mailbox listing."""

    messages: list[Message]
    total: int
    page: int
    limit: int
    total_pages: int


class MessageResponse(BaseModel):
    message: Message


class UnreadCountResponse(BaseModel):
    count: int


class MarkReadResponse(BaseModel):
    marked_as_read: int


class DeleteResponse(BaseModel):
    deleted: bool
