from datetime import date, datetime
from typing import Literal, Optional

from school_connect.schemas import CamelModel

NewsCategory = Literal["announcement", "event", "newsletter"]


class NewsCreate(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[NewsCategory] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = None


class NewsUpdate(NewsCreate):
    pass


class NewsResponse(CamelModel):
    id: int
    title: str
    content: str
    category: str
    image_url: Optional[str] = None
    publish_date: date
    author: str
    featured: bool
    created_at: datetime


class NewsDeleted(CamelModel):
    message: str
    announcement: NewsResponse
