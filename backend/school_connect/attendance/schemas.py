from datetime import date as Date, datetime
from typing import Literal, Optional

from school_connect.schemas import CamelModel

AttendanceStatus = Literal["present", "absent", "tardy", "excused"]


class AttendanceMark(CamelModel):
    student_id: Optional[int] = None
    date: Optional[Date] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None


class AttendanceResponse(CamelModel):
    id: int
    student_id: int
    date: Date
    status: str
    notes: Optional[str] = None
    marked_by: Optional[int] = None
    created_at: datetime
