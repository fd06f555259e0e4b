from datetime import datetime

from school_connect.schemas import CamelModel


class NotificationResponse(CamelModel):
    id: int
    user_id: int
    title: str
    message: str
    type: str
    read: bool
    created_at: datetime


class NotificationDeleted(CamelModel):
    message: str
    notification: NotificationResponse
