from datetime import date
from typing import List, Optional

from school_connect.database import InMemoryDB
from school_connect.grades.schemas import GradeCreate, GradeUpdate
from school_connect.models import Grade


def get_grade(db: InMemoryDB, grade_id: int) -> Optional[Grade]:
    return next((g for g in db.grades if g.id == grade_id), None)


def get_grades(
    db: InMemoryDB,
    teacher_id: Optional[int] = None,
    student_id: Optional[int] = None,
    assignment_id: Optional[int] = None,
) -> List[Grade]:
    """Grades matching every given filter, most recent date first."""
    grades = list(db.grades)
    if teacher_id is not None:
        grades = [g for g in grades if g.teacher_id == teacher_id]
    if student_id is not None:
        grades = [g for g in grades if g.student_id == student_id]
    if assignment_id is not None:
        grades = [g for g in grades if g.assignment_id == assignment_id]
    grades.sort(key=lambda g: g.date, reverse=True)
    return grades


def create_grade(db: InMemoryDB, grade: GradeCreate, teacher_id: int) -> Grade:
    db_grade = Grade(
        id=db.next_id("grades"),
        student_id=grade.student_id,
        teacher_id=teacher_id,
        subject=grade.subject,
        assignment_name=grade.assignment_name,
        score=grade.score,
        max_score=grade.max_score,
        date=grade.date or date.today(),
        comments=grade.comments or None,
        assignment_id=grade.assignment_id,
    )
    db.grades.append(db_grade)
    return db_grade


def update_grade(db_grade: Grade, grade_update: GradeUpdate) -> Grade:
    """Apply the fields present in the update; comments can be cleared with null."""
    if grade_update.subject:
        db_grade.subject = grade_update.subject
    if grade_update.assignment_name:
        db_grade.assignment_name = grade_update.assignment_name
    if grade_update.score is not None:
        db_grade.score = grade_update.score
    if grade_update.max_score:
        db_grade.max_score = grade_update.max_score
    if grade_update.date:
        db_grade.date = grade_update.date
    if "comments" in grade_update.model_fields_set:
        db_grade.comments = grade_update.comments
    return db_grade
