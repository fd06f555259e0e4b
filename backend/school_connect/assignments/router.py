import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from school_connect.assignments import crud
from school_connect.assignments.schemas import (
    AssignmentCreate, AssignmentUpdate, AssignmentResponse, AssignmentDeleted, SubmissionsResponse,
)
from school_connect.auth.dependencies import get_current_user, ensure_role, ensure_self_or_admin
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.students.crud import get_student

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/assignments",
    tags=["assignments"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[AssignmentResponse])
async def get_assignments(
    teacher_id: int = Query(..., alias="teacherId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, teacher_id, "Forbidden: not authorized to access these assignments")
    try:
        return crud.get_teacher_assignments(db, teacher_id)
    except Exception as e:
        logger.error(f"Error fetching assignments: {e}")
        raise HTTPException(status_code=500, detail="Error fetching assignments")


@router.get("/upcoming", response_model=List[AssignmentResponse])
async def get_upcoming_assignments(
    teacher_id: int = Query(..., alias="teacherId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Assignments due today or later."""
    ensure_self_or_admin(current_user, teacher_id, "Forbidden: not authorized to access these assignments")
    try:
        return crud.get_teacher_assignments(db, teacher_id, due_from=date.today())
    except Exception as e:
        logger.error(f"Error fetching upcoming assignments: {e}")
        raise HTTPException(status_code=500, detail="Error fetching upcoming assignments")


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment: AssignmentCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_role(current_user, ("teacher", "admin"), "Forbidden: not authorized to create assignments")
    if not assignment.subject or not assignment.title or not assignment.due_date:
        raise HTTPException(status_code=400, detail="Subject, title, and due date are required")

    try:
        db_assignment = crud.create_assignment(db, assignment, teacher_id=current_user.id)
        logger.info(f"Assignment {db_assignment.id} created by teacher {current_user.id}")
        return db_assignment
    except Exception as e:
        logger.error(f"Error creating assignment: {e}")
        raise HTTPException(status_code=500, detail="Error creating assignment")


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: int,
    assignment_update: AssignmentUpdate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_assignment = crud.get_assignment(db, assignment_id)
        if db_assignment is None:
            raise HTTPException(status_code=404, detail="Assignment not found")
        ensure_self_or_admin(current_user, db_assignment.teacher_id,
                             "Forbidden: not authorized to update this assignment")

        return crud.update_assignment(db_assignment, assignment_update)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating assignment {assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating assignment")


@router.delete("/{assignment_id}", response_model=AssignmentDeleted)
async def delete_assignment(
    assignment_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_assignment = crud.get_assignment(db, assignment_id)
        if db_assignment is None:
            raise HTTPException(status_code=404, detail="Assignment not found")
        ensure_self_or_admin(current_user, db_assignment.teacher_id,
                             "Forbidden: not authorized to delete this assignment")

        deleted = crud.delete_assignment(db, db_assignment)
        logger.info(f"Assignment {assignment_id} deleted by user {current_user.id}")
        return {"message": "Assignment deleted successfully", "assignment": deleted}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting assignment {assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting assignment")


@router.get("/{assignment_id}/submissions", response_model=SubmissionsResponse)
async def get_submissions(
    assignment_id: int,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_assignment = crud.get_assignment(db, assignment_id)
        if db_assignment is None:
            raise HTTPException(status_code=404, detail="Assignment not found")
        ensure_self_or_admin(current_user, db_assignment.teacher_id,
                             "Forbidden: not authorized to view these submissions")

        submissions = []
        for row in crud.get_statuses(db, assignment_id=assignment_id):
            student = get_student(db, row.student_id)
            submissions.append({
                "student_id": row.student_id,
                "student_name": student.name if student else f"Student {row.student_id}",
                "status": row.status,
                "submission_date": row.submission_date,
                "grade": row.grade,
                "feedback": row.feedback,
            })

        return {"assignment": db_assignment, "submissions": submissions}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching submissions for assignment {assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching submissions")
