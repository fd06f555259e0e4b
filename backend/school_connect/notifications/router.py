import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from school_connect.auth.dependencies import get_current_user, ensure_self
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.notifications import crud
from school_connect.notifications.schemas import NotificationResponse, NotificationDeleted
from school_connect.schemas import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[NotificationResponse])
async def get_notifications(
    user_id: int = Query(..., alias="userId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to access these notifications")
    try:
        return crud.list_for_user(db, user_id)
    except Exception as e:
        logger.error(f"Error fetching notifications for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching notifications")


@router.put("/read-all", response_model=List[NotificationResponse])
async def mark_all_notifications_as_read(
    user_id: int = Query(..., alias="userId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to modify these notifications")
    try:
        return crud.mark_all_read(db, user_id)
    except Exception as e:
        logger.error(f"Error marking all notifications as read for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error marking all notifications as read")


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_as_read(
    notification_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        notification = crud.get_notification(db, notification_id)
        if notification is None:
            raise HTTPException(status_code=404, detail="Notification not found")
        ensure_self(current_user, notification.user_id,
                    "Forbidden: not authorized to modify this notification")

        notification.read = True
        return notification
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error marking notification {notification_id} as read: {e}")
        raise HTTPException(status_code=500, detail="Error marking notification as read")


@router.delete("/{notification_id}", response_model=NotificationDeleted)
async def delete_notification(
    notification_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        notification = crud.get_notification(db, notification_id)
        if notification is None:
            raise HTTPException(status_code=404, detail="Notification not found")
        ensure_self(current_user, notification.user_id,
                    "Forbidden: not authorized to delete this notification")

        deleted = crud.delete_notification(db, notification)
        return {"message": "Notification deleted successfully", "notification": deleted}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting notification {notification_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting notification")


@router.delete("", response_model=MessageResponse)
async def delete_all_notifications(
    user_id: int = Query(..., alias="userId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self(current_user, user_id, "Forbidden: not authorized to delete these notifications")
    try:
        deleted = crud.delete_all_for_user(db, user_id)
        logger.info(f"Deleted {deleted} notifications for user {user_id}")
        return {"message": f"{deleted} notifications deleted successfully"}
    except Exception as e:
        logger.error(f"Error deleting all notifications for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting all notifications")
