import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from school_connect.auth.dependencies import get_current_user, ensure_role
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.news import crud
from school_connect.news.schemas import NewsCreate, NewsUpdate, NewsResponse, NewsDeleted

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/news",
    tags=["news"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[NewsResponse])
async def get_school_news(
    category: Optional[str] = Query(None),
    db: InMemoryDB = Depends(get_db),
):
    """Public school news feed, newest first."""
    try:
        return crud.get_news(db, category=category)
    except Exception as e:
        logger.error(f"Error fetching school news: {e}")
        raise HTTPException(status_code=500, detail="Error fetching school news")


@router.get("/recent", response_model=List[NewsResponse])
async def get_recent_announcements(db: InMemoryDB = Depends(get_db)):
    try:
        return crud.get_recent_announcements(db)
    except Exception as e:
        logger.error(f"Error fetching recent announcements: {e}")
        raise HTTPException(status_code=500, detail="Error fetching recent announcements")


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    item: NewsCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not item.title or not item.content or not item.category:
        raise HTTPException(status_code=400, detail="Title, content, and category are required")
    ensure_role(current_user, ("admin", "teacher"), "Forbidden: not authorized to create announcements")

    try:
        db_item = crud.create_news_item(db, item, author=current_user)
        logger.info(f"Announcement {db_item.id} created by user {current_user.id}")
        return db_item
    except Exception as e:
        logger.error(f"Error creating announcement: {e}")
        raise HTTPException(status_code=500, detail="Error creating announcement")


@router.put("/{news_id}", response_model=NewsResponse)
async def update_announcement(
    news_id: int,
    update: NewsUpdate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_item = crud.get_news_item(db, news_id)
        if db_item is None:
            raise HTTPException(status_code=404, detail="Announcement not found")
        if not crud.can_edit(current_user, db_item):
            raise HTTPException(status_code=403, detail="Forbidden: not authorized to update this announcement")

        return crud.update_news_item(db_item, update)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating announcement {news_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating announcement")


@router.delete("/{news_id}", response_model=NewsDeleted)
async def delete_announcement(
    news_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_item = crud.get_news_item(db, news_id)
        if db_item is None:
            raise HTTPException(status_code=404, detail="Announcement not found")
        if not crud.can_edit(current_user, db_item):
            raise HTTPException(status_code=403, detail="Forbidden: not authorized to delete this announcement")

        db.news.remove(db_item)
        logger.info(f"Announcement {news_id} deleted by user {current_user.id}")
        return {"message": "Announcement deleted successfully", "announcement": db_item}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting announcement {news_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting announcement")
