from datetime import datetime
from typing import List, Literal, Optional

from school_connect.schemas import CamelModel

ResourceType = Literal["document", "image", "video", "link", "archive", "presentation", "spreadsheet"]


class ResourceCreate(CamelModel):
    title: Optional[str] = None
    type: Optional[ResourceType] = None
    url: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = []


class ResourceResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    type: str
    url: str
    uploaded_by: int
    tags: List[str]
    created_at: datetime


class ResourceRequestCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None


class ResourceRequestResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: str
    created_at: datetime
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[int] = None
    response: Optional[str] = None
