from typing import List, Optional

from school_connect.database import InMemoryDB
from school_connect.models import Notification


def get_notification(db: InMemoryDB, notification_id: int) -> Optional[Notification]:
    return next((n for n in db.notifications if n.id == notification_id), None)


def list_for_user(db: InMemoryDB, user_id: int) -> List[Notification]:
    return [n for n in db.notifications if n.user_id == user_id]


def mark_all_read(db: InMemoryDB, user_id: int) -> List[Notification]:
    notifications = list_for_user(db, user_id)
    for notification in notifications:
        notification.read = True
    return notifications


def delete_notification(db: InMemoryDB, notification: Notification) -> Notification:
    db.notifications.remove(notification)
    return notification


def delete_all_for_user(db: InMemoryDB, user_id: int) -> int:
    """Remove every notification of a user and return how many were removed."""
    remaining = [n for n in db.notifications if n.user_id != user_id]
    deleted = len(db.notifications) - len(remaining)
    db.notifications[:] = remaining
    return deleted
