import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from school_connect.auth.dependencies import get_current_user, ensure_self
from school_connect.database import InMemoryDB, get_db
from school_connect.events import crud
from school_connect.events.schemas import EventResponse
from school_connect.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/events",
    tags=["events"],
)


@router.get("", response_model=List[EventResponse])
async def get_events(
    user_id: int = Query(..., alias="userId"),
    role: Optional[str] = Query(None),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Calendar events for the given role, defaulting to the caller's own role."""
    ensure_self(current_user, user_id, "Forbidden: not authorized to access these events")
    try:
        return crud.get_events_for_role(db, role or current_user.role)
    except Exception as e:
        logger.error(f"Error fetching events for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching events")
