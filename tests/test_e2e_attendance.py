from fastapi.testclient import TestClient

from school_connect.database import db
from tests.conftest import TEACHER


def test_get_attendance_for_date(client: TestClient, teacher_headers):
    response = client.get(f"/api/attendance?teacherId={TEACHER['id']}&date=2023-06-02", headers=teacher_headers)

    assert response.status_code == 200
    records = response.json()
    assert {r["studentId"]: r["status"] for r in records} == {101: "absent", 102: "present"}
    assert next(r for r in records if r["studentId"] == 101)["notes"] == "Parent called to report illness"


def test_get_attendance_for_student(client: TestClient, teacher_headers):
    response = client.get(f"/api/attendance?teacherId={TEACHER['id']}&studentId=101", headers=teacher_headers)
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_get_attendance_requires_own_teacher_id(client: TestClient, parent_headers):
    response = client.get(f"/api/attendance?teacherId={TEACHER['id']}", headers=parent_headers)
    assert response.status_code == 403


def test_mark_attendance_creates_record(client: TestClient, teacher_headers):
    response = client.post("/api/attendance", headers=teacher_headers, json={
        "studentId": 101,
        "date": "2023-06-06",
        "status": "present",
    })

    assert response.status_code == 201, response.text
    record = response.json()
    assert record["id"] == 7
    assert record["markedBy"] == TEACHER["id"]
    assert len(db.attendance_records) == 7


def test_marking_same_day_twice_updates_instead_of_duplicating(client: TestClient, teacher_headers):
    first = client.post("/api/attendance", headers=teacher_headers, json={
        "studentId": 102, "date": "2023-06-07", "status": "absent",
    })
    second = client.post("/api/attendance", headers=teacher_headers, json={
        "studentId": 102, "date": "2023-06-07", "status": "excused", "notes": "Doctor's note received",
    })

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["status"] == "excused"

    matching = [r for r in db.attendance_records if r.student_id == 102 and r.date.isoformat() == "2023-06-07"]
    assert len(matching) == 1


def test_mark_existing_seeded_record(client: TestClient, teacher_headers):
    response = client.post("/api/attendance", headers=teacher_headers, json={
        "studentId": 101, "date": "2023-06-02", "status": "excused",
    })
    assert response.status_code == 200
    assert response.json()["id"] == 3
    assert len(db.attendance_records) == 6


def test_mark_attendance_requires_fields(client: TestClient, teacher_headers):
    response = client.post("/api/attendance", headers=teacher_headers, json={"studentId": 101})
    assert response.status_code == 400
    assert response.json()["message"] == "Student ID, date, and status are required"


def test_mark_attendance_rejects_unknown_status(client: TestClient, teacher_headers):
    response = client.post("/api/attendance", headers=teacher_headers, json={
        "studentId": 101, "date": "2023-06-06", "status": "sleeping",
    })
    assert response.status_code == 400
