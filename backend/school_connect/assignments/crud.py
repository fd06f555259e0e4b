from datetime import date
from typing import List, Optional

from school_connect.assignments.schemas import AssignmentCreate, AssignmentUpdate
from school_connect.database import InMemoryDB
from school_connect.models import Assignment, AssignmentStatus


def get_assignment(db: InMemoryDB, assignment_id: int) -> Optional[Assignment]:
    return next((a for a in db.assignments if a.id == assignment_id), None)


def get_teacher_assignments(db: InMemoryDB, teacher_id: int, due_from: Optional[date] = None) -> List[Assignment]:
    """A teacher's assignments by due date ascending, optionally only those due on or after `due_from`."""
    assignments = [a for a in db.assignments if a.teacher_id == teacher_id]
    if due_from is not None:
        assignments = [a for a in assignments if a.due_date >= due_from]
    assignments.sort(key=lambda a: a.due_date)
    return assignments


def create_assignment(db: InMemoryDB, assignment: AssignmentCreate, teacher_id: int) -> Assignment:
    """
    Create an assignment and a not_started status row for every student
    taught by the teacher.
    """
    db_assignment = Assignment(
        id=db.next_id("assignments"),
        teacher_id=teacher_id,
        subject=assignment.subject,
        title=assignment.title,
        description=assignment.description or None,
        due_date=assignment.due_date,
        attachments=assignment.attachments or None,
    )
    db.assignments.append(db_assignment)

    for student in db.students:
        if student.teacher_id != teacher_id:
            continue
        db.assignment_statuses.append(AssignmentStatus(
            id=db.next_id("assignment_statuses"),
            assignment_id=db_assignment.id,
            student_id=student.id,
        ))
    return db_assignment


def update_assignment(db_assignment: Assignment, assignment_update: AssignmentUpdate) -> Assignment:
    """Apply the fields present in the update; description and attachments can be cleared with null."""
    if assignment_update.subject:
        db_assignment.subject = assignment_update.subject
    if assignment_update.title:
        db_assignment.title = assignment_update.title
    if assignment_update.due_date:
        db_assignment.due_date = assignment_update.due_date
    if "description" in assignment_update.model_fields_set:
        db_assignment.description = assignment_update.description
    if "attachments" in assignment_update.model_fields_set:
        db_assignment.attachments = assignment_update.attachments
    return db_assignment


def delete_assignment(db: InMemoryDB, db_assignment: Assignment) -> Assignment:
    """Remove the assignment together with all of its status rows."""
    db.assignments.remove(db_assignment)
    db.assignment_statuses[:] = [
        s for s in db.assignment_statuses if s.assignment_id != db_assignment.id
    ]
    return db_assignment


def get_statuses(db: InMemoryDB, assignment_id: Optional[int] = None,
                 student_id: Optional[int] = None) -> List[AssignmentStatus]:
    statuses = db.assignment_statuses
    if assignment_id is not None:
        statuses = [s for s in statuses if s.assignment_id == assignment_id]
    if student_id is not None:
        statuses = [s for s in statuses if s.student_id == student_id]
    return list(statuses)
