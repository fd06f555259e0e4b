from datetime import datetime
from typing import List, Optional

from school_connect.schemas import CamelModel


class EventResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_time: datetime
    end_time: datetime
    type: str
    created_by: int
    audience: List[str]
    created_at: datetime
