import logging
import time
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from school_connect.attendance import crud
from school_connect.attendance.schemas import AttendanceMark, AttendanceResponse
from school_connect.auth.dependencies import get_current_user, ensure_self_or_admin
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/attendance",
    tags=["attendance"],
)


@router.get("", response_model=List[AttendanceResponse])
async def get_attendance_data(
    teacher_id: int = Query(..., alias="teacherId"),
    day: Optional[date] = Query(None, alias="date"),
    student_id: Optional[int] = Query(None, alias="studentId"),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Attendance records, optionally narrowed to one date and/or one student."""
    ensure_self_or_admin(current_user, teacher_id,
                         "Forbidden: not authorized to access this attendance data")
    try:
        return crud.get_attendance(db, day=day, student_id=student_id)
    except Exception as e:
        logger.error(f"Error fetching attendance data: {e}")
        raise HTTPException(status_code=500, detail="Error fetching attendance data")


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def mark_attendance(
    payload: AttendanceMark,
    response: Response,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Mark a student's attendance for a date. Answers 201 when a record is
    created and 200 when the existing record for that date is updated.
    """
    if not payload.student_id or not payload.date or not payload.status:
        raise HTTPException(status_code=400, detail="Student ID, date, and status are required")

    start_time = time.time()
    try:
        record, created = crud.mark_attendance(
            db,
            student_id=payload.student_id,
            day=payload.date,
            status=payload.status,
            notes=payload.notes,
            marked_by=current_user.id,
        )
        if not created:
            response.status_code = status.HTTP_200_OK

        logger.info(
            f"Attendance {'created' if created else 'updated'} - "
            f"student_id: {record.student_id}, date: {record.date}, status: {record.status}, "
            f"processing_time: {time.time() - start_time:.3f}s"
        )
        return record
    except Exception as e:
        logger.error(f"Error marking attendance: {e}")
        raise HTTPException(status_code=500, detail="Error marking attendance")
