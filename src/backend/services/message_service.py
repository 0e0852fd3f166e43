"""
Constituent messaging service.

Citizens write to representatives and staff; either party may reply. A
message's read state only ever moves from unread to read.
"""

import math
from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.exceptions import AuthorizationError, InvalidRecipientError, NotFoundError
from core.validation import parse_identifier, require_positive, require_text
from repositories.message_repository import MessageRepository
from repositories.user_repository import UserRepository
from schemas.converters import message_model_to_schema
from schemas.message import Message, MessagePage

logger = structlog.get_logger(__name__)

REPLY_PREFIX = "Re: "


def reply_subject(subject: str) -> str:
    """Prefix a subject for a reply, without stacking prefixes."""
    return subject if subject.startswith(REPLY_PREFIX) else f"{REPLY_PREFIX}{subject}"


class MessageService:
    """Service for sending, reading and managing messages."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = MessageRepository(db)
        self.users = UserRepository(db)

    async def send(self, sender_id: str, recipient_id: str, subject: str, content: str) -> Message:
        """
        Send a new message.

        Raises:
            ValidationError: If a field is missing or blank.
            InvalidRecipientError: If the recipient does not exist or is
                not a representative or staff member.
        """
        require_text(sender_id, "sender_id")
        require_text(recipient_id, "recipient_id")
        require_text(subject, "subject")
        require_text(content, "content")
        sender_id = parse_identifier(sender_id, "sender_id")
        recipient_id = parse_identifier(recipient_id, "recipient_id")

        recipient = await self.users.get_by_id(recipient_id)
        if recipient is None or not recipient.can_receive_messages:
            logger.warning("message_rejected_invalid_recipient", sender_id=sender_id, recipient_id=recipient_id)
            raise InvalidRecipientError()

        message = await self.repo.create(sender_id, recipient_id, subject, content)
        logger.info("message_sent", message_id=message.id, sender_id=sender_id, recipient_id=recipient_id)
        return message_model_to_schema(message)

    async def list_inbox(
        self, user_id: str, page: int = 1, limit: int = settings.DEFAULT_PAGE_SIZE
    ) -> MessagePage:
        """Messages received by the user, newest first."""
        user_id = parse_identifier(user_id, "user_id")
        require_positive(page, "page")
        require_positive(limit, "limit")
        messages, total = await self.repo.list_for_recipient(user_id, page, limit)
        return self._page(messages, total, page, limit)

    async def list_sent(
        self, user_id: str, page: int = 1, limit: int = settings.DEFAULT_PAGE_SIZE
    ) -> MessagePage:
        """Messages sent by the user, newest first."""
        user_id = parse_identifier(user_id, "user_id")
        require_positive(page, "page")
        require_positive(limit, "limit")
        messages, total = await self.repo.list_for_sender(user_id, page, limit)
        return self._page(messages, total, page, limit)

    def _page(self, messages, total: int, page: int, limit: int) -> MessagePage:
        return MessagePage(
            messages=[message_model_to_schema(m) for m in messages],
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )

    async def get_message_by_id(self, message_id: str, user_id: str) -> Optional[Message]:
        """
        Fetch a message visible to the user.

        Returns None when the message does not exist or the user is neither
        sender nor recipient. Opening an unread message as its recipient marks
        it read in the same transaction.
        """
        message_id = parse_identifier(message_id, "message_id")
        user_id = parse_identifier(user_id, "user_id")

        message = await self.repo.get_by_id(message_id, for_update=True)
        if message is None or not message.is_participant(user_id):
            return None

        if message.recipient_id == user_id and not message.read:
            await self.repo.mark_read(message)
            logger.info("message_marked_read", message_id=message_id, user_id=user_id)

        return message_model_to_schema(message)

    async def get_unread_count(self, user_id: str) -> int:
        user_id = parse_identifier(user_id, "user_id")
        return await self.repo.count_unread(user_id)

    async def mark_all_as_read(self, user_id: str) -> int:
        """Mark the user's unread inbox read; returns how many changed."""
        user_id = parse_identifier(user_id, "user_id")
        marked = await self.repo.mark_all_read(user_id)
        logger.info("messages_marked_read", user_id=user_id, count=marked)
        return marked

    async def reply(self, original_message_id: str, sender_id: str, content: str) -> Message:
        """
        Reply to a message.

        The reply goes to the other participant, under the original subject
        prefixed with "Re: " once.

        Raises:
            ValidationError: If the content is blank.
            NotFoundError: If the original message does not exist.
            AuthorizationError: If the sender was not a participant.
        """
        original_message_id = parse_identifier(original_message_id, "message_id")
        sender_id = parse_identifier(sender_id, "sender_id")
        require_text(content, "content")

        original = await self.repo.get_by_id(original_message_id)
        if original is None:
            raise NotFoundError("Original message not found")
        if not original.is_participant(sender_id):
            logger.warning("reply_rejected_not_participant", message_id=original_message_id, sender_id=sender_id)
            raise AuthorizationError("You can only reply to messages you sent or received")

        reply = await self.repo.create(
            sender_id=sender_id,
            recipient_id=original.other_party(sender_id),
            subject=reply_subject(original.subject),
            content=content,
        )
        logger.info("message_replied", message_id=reply.id, original_message_id=original_message_id)
        return message_model_to_schema(reply)

    async def delete_message(self, message_id: str, user_id: str) -> bool:
        """
        Delete a message the user sent or received.

        Returns False, without raising, when the message is missing or the
        user is not a participant.
        """
        message_id = parse_identifier(message_id, "message_id")
        user_id = parse_identifier(user_id, "user_id")
        deleted = await self.repo.delete_for_participant(message_id, user_id)
        if deleted:
            logger.info("message_deleted", message_id=message_id, user_id=user_id)
        return deleted
