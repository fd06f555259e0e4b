from pydantic import Field
from datetime import datetime
from typing import List, Literal, Optional

from school_connect.schemas import CamelModel


class MessageCreate(CamelModel):
    """Schema for sending a message to another user."""
    recipient_id: Optional[int] = Field(None, description="User receiving the message")
    content: Optional[str] = Field(None, description="Content of the message")
    type: Literal["text", "image", "file"] = Field("text", description="Kind of message")
    chat_id: Optional[int] = Field(None, description="Existing chat to post into")


class MessageData(CamelModel):
    """Schema for message data representation."""
    id: int
    chat_id: int
    sender_id: int
    recipient_id: int
    content: str
    type: str
    read: bool
    created_at: datetime


class Contact(CamelModel):
    """Messaging-relationship summary derived from the message list."""
    id: int
    name: str
    role: str
    last_message: str
    last_message_time: datetime
    unread_count: int


class ContactsResponse(CamelModel):
    contacts: List[Contact]
