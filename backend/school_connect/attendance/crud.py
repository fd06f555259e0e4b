from datetime import date
from typing import List, Optional, Tuple

from school_connect.database import InMemoryDB
from school_connect.models import AttendanceRecord


def get_attendance(
    db: InMemoryDB,
    day: Optional[date] = None,
    student_id: Optional[int] = None,
) -> List[AttendanceRecord]:
    """Attendance records filtered by date and/or student, newest date first."""
    records = list(db.attendance_records)
    if day is not None:
        records = [r for r in records if r.date == day]
    if student_id is not None:
        records = [r for r in records if r.student_id == student_id]
    records.sort(key=lambda r: r.date, reverse=True)
    return records


def get_record(db: InMemoryDB, student_id: int, day: date) -> Optional[AttendanceRecord]:
    return next(
        (r for r in db.attendance_records if r.student_id == student_id and r.date == day),
        None,
    )


def mark_attendance(
    db: InMemoryDB,
    student_id: int,
    day: date,
    status: str,
    notes: Optional[str],
    marked_by: int,
) -> Tuple[AttendanceRecord, bool]:
    """
    Record a student's status for a day. A second mark for the same
    (student, date) overwrites the existing record.

    Returns:
        (record, created) where created is False when an existing record was updated.
    """
    existing = get_record(db, student_id, day)
    if existing is not None:
        existing.status = status
        existing.notes = notes
        existing.marked_by = marked_by
        return existing, False

    record = AttendanceRecord(
        id=db.next_id("attendance_records"),
        student_id=student_id,
        date=day,
        status=status,
        notes=notes,
        marked_by=marked_by,
    )
    db.attendance_records.append(record)
    return record, True
