from datetime import date as Date, datetime
from typing import Optional

from pydantic import computed_field

from school_connect.grades import scale
from school_connect.schemas import CamelModel


class GradeCreate(CamelModel):
    student_id: Optional[int] = None
    subject: Optional[str] = None
    assignment_name: Optional[str] = None
    score: Optional[float] = None
    max_score: Optional[float] = None
    date: Optional[Date] = None
    comments: Optional[str] = None
    assignment_id: Optional[int] = None


class GradeUpdate(CamelModel):
    subject: Optional[str] = None
    assignment_name: Optional[str] = None
    score: Optional[float] = None
    max_score: Optional[float] = None
    date: Optional[Date] = None
    comments: Optional[str] = None


class GradeResponse(CamelModel):
    id: int
    student_id: int
    teacher_id: int
    subject: str
    assignment_name: str
    score: float
    max_score: float
    date: Date
    comments: Optional[str] = None
    assignment_id: Optional[int] = None
    created_at: datetime

    @computed_field(alias="percentage")
    @property
    def percentage(self) -> float:
        return scale.percentage(self.score, self.max_score)

    @computed_field(alias="letterGrade")
    @property
    def letter_grade(self) -> str:
        return scale.letter_grade(self.score, self.max_score)
