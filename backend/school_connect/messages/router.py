from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
import logging
import time

from school_connect.auth.dependencies import get_current_user, ensure_self
from school_connect.database import InMemoryDB, get_db
from school_connect.messages import service
from school_connect.messages.schemas import MessageCreate, MessageData, ContactsResponse
from school_connect.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/messages",
    tags=["messages"],
    responses={404: {"description": "Not found"}},
)


@router.get("/contacts", response_model=ContactsResponse)
async def get_contacts(
    user_id: int = Query(..., alias="userId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to access these contacts")
    try:
        return {"contacts": service.get_contacts(db, user_id)}
    except Exception as e:
        logger.error(f"Error fetching contacts for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching contacts")


@router.get("", response_model=List[MessageData])
async def get_messages(
    chat_id: int = Query(..., alias="chatId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Messages of one chat. Only participants may read an existing chat."""
    try:
        messages = service.get_chat_messages(db, chat_id)
        if messages and not service.is_participant(messages, current_user.id):
            raise HTTPException(status_code=403, detail="Forbidden: not a participant in this chat")
        return messages
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching messages for chat {chat_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching messages")


@router.get("/recent", response_model=List[MessageData])
async def get_recent_messages(
    user_id: int = Query(..., alias="userId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to access these messages")
    try:
        return service.get_recent_messages(db, user_id)
    except Exception as e:
        logger.error(f"Error fetching recent messages for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching recent messages")


@router.post("", response_model=MessageData, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: MessageCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not request.content or not request.content.strip():
        raise HTTPException(status_code=400, detail="Message content is required")
    if request.recipient_id is None:
        raise HTTPException(status_code=400, detail="Recipient is required")

    start_time = time.time()
    try:
        message = service.send_message(
            db,
            sender_id=current_user.id,
            recipient_id=request.recipient_id,
            content=request.content,
            message_type=request.type,
            chat_id=request.chat_id,
        )
        logger.info(
            f"send_message completed - message_id: {message.id}, chat_id: {message.chat_id}, "
            f"sender_id: {message.sender_id}, recipient_id: {message.recipient_id}, "
            f"processing_time: {time.time() - start_time:.3f}s"
        )
        return message
    except Exception as e:
        logger.error(f"Error sending message: {e}")
        raise HTTPException(status_code=500, detail="Error sending message")


@router.put("/{message_id}/read", response_model=MessageData)
async def mark_message_as_read(
    message_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        message = service.get_message(db, message_id)
        if message is None:
            raise HTTPException(status_code=404, detail="Message not found")
        if message.recipient_id != current_user.id:
            raise HTTPException(status_code=403, detail="Forbidden: not authorized to mark this message as read")

        message.read = True
        return message
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error marking message {message_id} as read: {e}")
        raise HTTPException(status_code=500, detail="Error marking message as read")
