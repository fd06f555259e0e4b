from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Record types held by the in-memory store. Relationships are plain integer
# fields (student_id, teacher_id, parent_id) resolved by scanning the lists.

@dataclass
class User:
    id: int
    name: str
    email: str
    password: str  # bcrypt hash
    role: str
    profile_picture: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    last_active: datetime = field(default_factory=utcnow)


@dataclass
class Session:
    id: str
    user_id: int
    created_at: datetime
    expires_at: datetime


@dataclass
class Student:
    id: int
    name: str
    grade: int
    parent_id: int
    teacher_id: int
    profile_picture: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    medical_info: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class StudentNote:
    id: int
    student_id: int
    teacher_id: int
    note: str
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class AttendanceRecord:
    id: int
    student_id: int
    date: date
    status: str
    notes: Optional[str] = None
    marked_by: Optional[int] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Grade:
    id: int
    student_id: int
    teacher_id: int
    subject: str
    assignment_name: str
    score: float
    max_score: float
    date: date
    comments: Optional[str] = None
    assignment_id: Optional[int] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Assignment:
    id: int
    teacher_id: int
    subject: str
    title: str
    due_date: date
    description: Optional[str] = None
    attachments: Optional[List[str]] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class AssignmentStatus:
    id: int
    assignment_id: int
    student_id: int
    status: str = "not_started"
    submission_date: Optional[date] = None
    grade: Optional[float] = None
    feedback: Optional[str] = None


@dataclass
class Message:
    id: int
    chat_id: int
    sender_id: int
    recipient_id: int
    content: str
    type: str = "text"
    read: bool = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class CalendarEvent:
    id: int
    title: str
    start_time: datetime
    end_time: datetime
    type: str
    created_by: int
    description: Optional[str] = None
    location: Optional[str] = None
    audience: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class NewsItem:
    id: int
    title: str
    content: str
    category: str
    publish_date: date
    author: str
    image_url: Optional[str] = None
    featured: bool = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Resource:
    id: int
    title: str
    type: str
    url: str
    uploaded_by: int
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class ResourceRequest:
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: str = "pending"
    created_at: datetime = field(default_factory=utcnow)
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[int] = None
    response: Optional[str] = None


@dataclass
class Notification:
    id: int
    user_id: int
    title: str
    message: str
    type: str
    read: bool = False
    created_at: datetime = field(default_factory=utcnow)
