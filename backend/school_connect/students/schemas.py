from datetime import date, datetime
from typing import List, Optional

from school_connect.attendance.schemas import AttendanceResponse
from school_connect.grades.schemas import GradeResponse
from school_connect.schemas import CamelModel


class StudentResponse(CamelModel):
    id: int
    name: str
    grade: int
    parent_id: int
    teacher_id: int
    profile_picture: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    medical_info: Optional[str] = None
    created_at: datetime


class StudentNoteCreate(CamelModel):
    student_id: Optional[int] = None
    note: Optional[str] = None


class StudentNoteResponse(CamelModel):
    id: int
    student_id: int
    teacher_id: int
    note: str
    created_at: datetime


class StudentDetailResponse(StudentResponse):
    notes: List[StudentNoteResponse] = []


class StudentSummary(CamelModel):
    id: int
    name: str


class StudentAssignment(CamelModel):
    id: int
    subject: str
    title: str
    description: Optional[str] = None
    due_date: date
    attachments: Optional[List[str]] = None
    status: str
    submission_date: Optional[date] = None
    grade: Optional[float] = None
    feedback: Optional[str] = None


class StudentAttendanceResponse(CamelModel):
    student: StudentSummary
    attendance: List[AttendanceResponse]


class StudentGradesResponse(CamelModel):
    student: StudentSummary
    grades: List[GradeResponse]


class StudentAssignmentsResponse(CamelModel):
    student: StudentSummary
    assignments: List[StudentAssignment]
