"""
Constituent messaging endpoints.

All endpoints act on behalf of the authenticated user.
"""

from typing import Annotated, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.deps import CurrentUser, get_message_service, has_flag
from core.config import settings
from schemas.message import (
    DeleteResponse,
    MailboxEnum,
    MarkReadResponse,
    MessageCreate,
    MessagePage,
    MessageReply,
    MessageResponse,
    UnreadCountResponse,
)
from services.message_service import MessageService

router = APIRouter()

Service = Annotated[MessageService, Depends(get_message_service)]


@router.get("", response_model=Union[UnreadCountResponse, MarkReadResponse, MessagePage])
async def list_messages(
    request: Request,
    current_user: CurrentUser,
    service: Service,
    mailbox: MailboxEnum = Query(MailboxEnum.INBOX, alias="type"),
    page: int = Query(1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, le=settings.MAX_PAGE_SIZE),
) -> Union[UnreadCountResponse, MarkReadResponse, MessagePage]:
    """
    List the caller's inbox or sent messages, newest first.

    The ``count`` flag returns the unread count instead; the ``markRead``
    flag marks the whole inbox read and returns how many changed. ``count``
    wins when both are given.
    """
    if has_flag(request, "count"):
        return UnreadCountResponse(count=await service.get_unread_count(current_user.id))
    if has_flag(request, "markRead"):
        return MarkReadResponse(marked_as_read=await service.mark_all_as_read(current_user.id))

    if mailbox == MailboxEnum.SENT:
        return await service.list_sent(current_user.id, page=page, limit=limit)
    return await service.list_inbox(current_user.id, page=page, limit=limit)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: MessageCreate,
    current_user: CurrentUser,
    service: Service,
) -> MessageResponse:
    """Send a message to a representative or staff member."""
    message = await service.send(
        sender_id=current_user.id,
        recipient_id=payload.recipient_id,
        subject=payload.subject,
        content=payload.content,
    )
    return MessageResponse(message=message)


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: str,
    current_user: CurrentUser,
    service: Service,
) -> MessageResponse:
    """Open a message; opening it as the recipient marks it read."""
    message = await service.get_message_by_id(message_id, current_user.id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageResponse(message=message)


@router.post("/{message_id}/reply", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def reply_to_message(
    message_id: str,
    payload: MessageReply,
    current_user: CurrentUser,
    service: Service,
) -> MessageResponse:
    """Reply to the other participant of a message."""
    message = await service.reply(message_id, current_user.id, payload.content)
    return MessageResponse(message=message)


@router.delete("/{message_id}", response_model=DeleteResponse)
async def delete_message(
    message_id: str,
    current_user: CurrentUser,
    service: Service,
) -> DeleteResponse:
    """Delete a message the caller sent or received."""
    deleted = await service.delete_message(message_id, current_user.id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return DeleteResponse(deleted=True)
