import logging
from typing import Dict, List, Optional

from school_connect import models
from school_connect.auth.service import get_user_by_id
from school_connect.database import InMemoryDB

logger = logging.getLogger(__name__)


def get_chat_messages(db: InMemoryDB, chat_id: int) -> List[models.Message]:
    return [m for m in db.messages if m.chat_id == chat_id]


def get_message(db: InMemoryDB, message_id: int) -> Optional[models.Message]:
    return next((m for m in db.messages if m.id == message_id), None)


def is_participant(messages: List[models.Message], user_id: int) -> bool:
    return any(user_id in (m.sender_id, m.recipient_id) for m in messages)


def get_user_messages(db: InMemoryDB, user_id: int) -> List[models.Message]:
    """Every message the user sent or received, newest first."""
    messages = [m for m in db.messages if user_id in (m.sender_id, m.recipient_id)]
    messages.sort(key=lambda m: m.created_at, reverse=True)
    return messages


def get_recent_messages(db: InMemoryDB, user_id: int) -> List[models.Message]:
    """The latest message of each chat the user takes part in."""
    seen_chats = set()
    recent = []
    for message in get_user_messages(db, user_id):
        if message.chat_id not in seen_chats:
            seen_chats.add(message.chat_id)
            recent.append(message)
    return recent


def get_contacts(db: InMemoryDB, user_id: int) -> List[Dict]:
    """
    Build the user's contact list from the message history: one entry per
    counterpart with the last message exchanged and how many of their
    messages the user has not read yet.
    """
    contacts: Dict[int, Dict] = {}
    for message in get_user_messages(db, user_id):
        counterpart_id = message.recipient_id if message.sender_id == user_id else message.sender_id
        contact = contacts.get(counterpart_id)
        if contact is None:
            counterpart = get_user_by_id(db, counterpart_id)
            contact = {
                "id": counterpart_id,
                "name": counterpart.name if counterpart else f"User {counterpart_id}",
                "role": counterpart.role if counterpart else "unknown",
                # Messages are newest first, so the first one seen is the last exchanged
                "last_message": message.content,
                "last_message_time": message.created_at,
                "unread_count": 0,
            }
            contacts[counterpart_id] = contact
        if message.recipient_id == user_id and not message.read:
            contact["unread_count"] += 1
    return list(contacts.values())


def find_chat_id(db: InMemoryDB, user_id: int, other_id: int) -> Optional[int]:
    existing = next(
        (m for m in db.messages
         if (m.sender_id, m.recipient_id) in ((user_id, other_id), (other_id, user_id))),
        None,
    )
    return existing.chat_id if existing else None


def send_message(
    db: InMemoryDB,
    sender_id: int,
    recipient_id: int,
    content: str,
    message_type: str = "text",
    chat_id: Optional[int] = None,
) -> models.Message:
    """Append a message, reusing the pair's chat or opening a new one."""
    if chat_id is None:
        chat_id = find_chat_id(db, sender_id, recipient_id)
    if chat_id is None:
        chat_id = db.next_id("messages", field="chat_id")
        logger.info(f"Opened chat {chat_id} between users {sender_id} and {recipient_id}")

    message = models.Message(
        id=db.next_id("messages"),
        chat_id=chat_id,
        sender_id=sender_id,
        recipient_id=recipient_id,
        content=content,
        type=message_type,
    )
    db.messages.append(message)
    return message
