from datetime import date, datetime
from typing import List, Optional

from school_connect.schemas import CamelModel


class AssignmentCreate(CamelModel):
    subject: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    attachments: Optional[List[str]] = None


class AssignmentUpdate(AssignmentCreate):
    pass


class AssignmentResponse(CamelModel):
    id: int
    teacher_id: int
    subject: str
    title: str
    description: Optional[str] = None
    due_date: date
    attachments: Optional[List[str]] = None
    created_at: datetime


class AssignmentDeleted(CamelModel):
    message: str
    assignment: AssignmentResponse


class Submission(CamelModel):
    student_id: int
    student_name: str
    status: str
    submission_date: Optional[date] = None
    grade: Optional[float] = None
    feedback: Optional[str] = None


class SubmissionsResponse(CamelModel):
    assignment: AssignmentResponse
    submissions: List[Submission]
