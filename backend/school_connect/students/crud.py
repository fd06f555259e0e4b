from typing import List, Optional

from school_connect.database import InMemoryDB
from school_connect.models import Student, StudentNote, User


def get_student(db: InMemoryDB, student_id: int) -> Optional[Student]:
    return next((s for s in db.students if s.id == student_id), None)


def get_students_by_parent(db: InMemoryDB, parent_id: int) -> List[Student]:
    return [s for s in db.students if s.parent_id == parent_id]


def get_students_by_teacher(db: InMemoryDB, teacher_id: int) -> List[Student]:
    return [s for s in db.students if s.teacher_id == teacher_id]


def get_notes(db: InMemoryDB, student_id: int) -> List[StudentNote]:
    return [n for n in db.student_notes if n.student_id == student_id]


def create_note(db: InMemoryDB, student_id: int, teacher_id: int, note: str) -> StudentNote:
    db_note = StudentNote(
        id=db.next_id("student_notes"),
        student_id=student_id,
        teacher_id=teacher_id,
        note=note,
    )
    db.student_notes.append(db_note)
    return db_note


def can_view(user: User, student: Student) -> bool:
    """The student's parent, teacher, or an admin may view the record."""
    return user.id in (student.parent_id, student.teacher_id) or user.role == "admin"


def can_manage(user: User, student: Student) -> bool:
    """Only the student's teacher or an admin may see or add notes."""
    return user.id == student.teacher_id or user.role == "admin"
