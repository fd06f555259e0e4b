from datetime import date
from typing import List, Optional

from school_connect.database import InMemoryDB
from school_connect.models import NewsItem, User
from school_connect.news.schemas import NewsCreate, NewsUpdate

RECENT_ANNOUNCEMENTS_LIMIT = 3


def get_news_item(db: InMemoryDB, news_id: int) -> Optional[NewsItem]:
    return next((n for n in db.news if n.id == news_id), None)


def get_news(db: InMemoryDB, category: Optional[str] = None) -> List[NewsItem]:
    """News items, newest publish date first."""
    items = list(db.news)
    if category:
        items = [n for n in items if n.category == category]
    items.sort(key=lambda n: n.publish_date, reverse=True)
    return items


def get_recent_announcements(db: InMemoryDB) -> List[NewsItem]:
    return get_news(db, category="announcement")[:RECENT_ANNOUNCEMENTS_LIMIT]


def create_news_item(db: InMemoryDB, item: NewsCreate, author: User) -> NewsItem:
    db_item = NewsItem(
        id=db.next_id("news"),
        title=item.title,
        content=item.content,
        category=item.category,
        image_url=item.image_url or None,
        publish_date=date.today(),
        author=author.name,
        featured=bool(item.featured),
    )
    db.news.append(db_item)
    return db_item


def update_news_item(db_item: NewsItem, update: NewsUpdate) -> NewsItem:
    if update.title:
        db_item.title = update.title
    if update.content:
        db_item.content = update.content
    if update.category:
        db_item.category = update.category
    if "image_url" in update.model_fields_set:
        db_item.image_url = update.image_url
    if update.featured is not None:
        db_item.featured = update.featured
    return db_item


def can_edit(user: User, item: NewsItem) -> bool:
    """Admins may edit anything; teachers only what they authored."""
    if user.role == "admin":
        return True
    return user.role == "teacher" and item.author == user.name
