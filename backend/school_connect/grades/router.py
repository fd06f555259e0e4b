import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from school_connect.auth.dependencies import get_current_user, ensure_role, ensure_self_or_admin
from school_connect.database import InMemoryDB, get_db
from school_connect.grades import crud
from school_connect.grades.schemas import GradeCreate, GradeUpdate, GradeResponse
from school_connect.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/grades",
    tags=["grades"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[GradeResponse])
async def get_grades(
    teacher_id: int = Query(..., alias="teacherId"),
    student_id: Optional[int] = Query(None, alias="studentId"),
    assignment_id: Optional[int] = Query(None, alias="assignmentId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, teacher_id, "Forbidden: not authorized to access these grades")
    try:
        return crud.get_grades(db, teacher_id=teacher_id, student_id=student_id, assignment_id=assignment_id)
    except Exception as e:
        logger.error(f"Error fetching grades: {e}")
        raise HTTPException(status_code=500, detail="Error fetching grades")


@router.post("", response_model=GradeResponse, status_code=status.HTTP_201_CREATED)
async def add_grade(
    grade: GradeCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Record a grade. The date defaults to today."""
    ensure_role(current_user, ("teacher", "admin"), "Forbidden: not authorized to add grades")
    if (not grade.student_id or not grade.subject or not grade.assignment_name
            or grade.score is None or not grade.max_score):
        raise HTTPException(status_code=400, detail="Required fields missing")

    try:
        db_grade = crud.create_grade(db, grade, teacher_id=current_user.id)
        logger.info(f"Grade {db_grade.id} added for student {db_grade.student_id} by teacher {current_user.id}")
        return db_grade
    except Exception as e:
        logger.error(f"Error adding grade: {e}")
        raise HTTPException(status_code=500, detail="Error adding grade")


@router.put("/{grade_id}", response_model=GradeResponse)
async def update_grade(
    grade_id: int,
    grade_update: GradeUpdate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_grade = crud.get_grade(db, grade_id)
        if db_grade is None:
            raise HTTPException(status_code=404, detail="Grade not found")
        ensure_self_or_admin(current_user, db_grade.teacher_id,
                             "Forbidden: not authorized to update this grade")

        return crud.update_grade(db_grade, grade_update)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating grade {grade_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating grade")
