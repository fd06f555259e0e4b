import logging
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from school_connect.assignments.crud import get_assignment, get_statuses
from school_connect.attendance.crud import get_attendance
from school_connect.auth.dependencies import get_current_user, ensure_self_or_admin
from school_connect.database import InMemoryDB, get_db
from school_connect.grades.crud import get_grades
from school_connect.models import Student, User
from school_connect.students import crud
from school_connect.students.schemas import (
    StudentResponse,
    StudentDetailResponse,
    StudentNoteCreate,
    StudentNoteResponse,
    StudentAttendanceResponse,
    StudentGradesResponse,
    StudentAssignmentsResponse,
)

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="/api",
    tags=["students"],
)


def _get_viewable_student(db: InMemoryDB, student_id: int, current_user: User, what: str) -> Student:
    student = crud.get_student(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    if not crud.can_view(current_user, student):
        raise HTTPException(status_code=403, detail=f"Forbidden: not authorized to view this {what}")
    return student


@router.get("/parents/{parent_id}/students", response_model=List[StudentResponse])
async def get_students_by_parent(
    parent_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, parent_id, "Forbidden: not authorized to access these students")
    try:
        return crud.get_students_by_parent(db, parent_id)
    except Exception as e:
        logger.error(f"Error fetching students for parent {parent_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching students")


@router.get("/teachers/{teacher_id}/students", response_model=List[StudentResponse])
async def get_teacher_students(
    teacher_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, teacher_id, "Forbidden: not authorized to access these students")
    try:
        return crud.get_students_by_teacher(db, teacher_id)
    except Exception as e:
        logger.error(f"Error fetching students for teacher {teacher_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching students")


@router.get("/students/{student_id}", response_model=StudentDetailResponse)
async def get_student_details(
    student_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    A student's record. Teacher notes are included only for the student's
    teacher or an admin; parents get an empty list.
    """
    try:
        student = _get_viewable_student(db, student_id, current_user, "student")
        notes = crud.get_notes(db, student_id) if crud.can_manage(current_user, student) else []
        return {**asdict(student), "notes": notes}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching student details for {student_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching student details")


@router.get("/students/{student_id}/attendance", response_model=StudentAttendanceResponse)
async def get_student_attendance(
    student_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        student = _get_viewable_student(db, student_id, current_user, "student's attendance")
        return {
            "student": {"id": student.id, "name": student.name},
            "attendance": get_attendance(db, student_id=student_id),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching attendance for student {student_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching student attendance")


@router.get("/students/{student_id}/grades", response_model=StudentGradesResponse)
async def get_student_grades(
    student_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        student = _get_viewable_student(db, student_id, current_user, "student's grades")
        return {
            "student": {"id": student.id, "name": student.name},
            "grades": get_grades(db, student_id=student_id),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching grades for student {student_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching student grades")


@router.get("/students/{student_id}/assignments", response_model=StudentAssignmentsResponse)
async def get_student_assignments(
    student_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The student's assignments, each with that student's progress, by due date."""
    try:
        student = _get_viewable_student(db, student_id, current_user, "student's assignments")

        assignments = []
        for row in get_statuses(db, student_id=student_id):
            assignment = get_assignment(db, row.assignment_id)
            if assignment is None:
                continue
            assignments.append({
                "id": assignment.id,
                "subject": assignment.subject,
                "title": assignment.title,
                "description": assignment.description,
                "due_date": assignment.due_date,
                "attachments": assignment.attachments,
                "status": row.status,
                "submission_date": row.submission_date,
                "grade": row.grade,
                "feedback": row.feedback,
            })
        assignments.sort(key=lambda a: a["due_date"])

        return {"student": {"id": student.id, "name": student.name}, "assignments": assignments}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching assignments for student {student_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching student assignments")


@router.post("/student-notes", response_model=StudentNoteResponse, status_code=status.HTTP_201_CREATED)
async def add_student_note(
    payload: StudentNoteCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not payload.student_id or not payload.note:
        raise HTTPException(status_code=400, detail="Student ID and note are required")

    try:
        student = crud.get_student(db, payload.student_id)
        if student is None:
            raise HTTPException(status_code=404, detail="Student not found")
        if not crud.can_manage(current_user, student):
            raise HTTPException(status_code=403, detail="Forbidden: not authorized to add notes to this student")

        note = crud.create_note(db, student.id, current_user.id, payload.note)
        logger.info(f"Note {note.id} added to student {student.id} by user {current_user.id}")
        return note
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error adding student note: {e}")
        raise HTTPException(status_code=500, detail="Error adding student note")
