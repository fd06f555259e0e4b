import pytest
from fastapi.testclient import TestClient

from school_connect.grades.scale import letter_grade, percentage
from tests.conftest import TEACHER


@pytest.mark.parametrize("score, max_score, expected", [
    (97, 100, "A+"),
    (93, 100, "A"),
    (45, 50, "A-"),
    (85, 100, "B"),
    (70, 100, "C-"),
    (59.9, 100, "F"),
])
def test_letter_grade(score, max_score, expected):
    assert letter_grade(score, max_score) == expected


def test_percentage_with_zero_max():
    assert percentage(10, 0) == 0.0


def test_get_grades_for_teacher(client: TestClient, teacher_headers):
    response = client.get(f"/api/grades?teacherId={TEACHER['id']}", headers=teacher_headers)

    assert response.status_code == 200
    grades = response.json()
    assert len(grades) == 6
    # Most recent first
    assert grades[0]["date"] == "2023-05-25"
    assert all("letterGrade" in g for g in grades)


def test_get_grades_filtered_by_student(client: TestClient, teacher_headers):
    response = client.get(f"/api/grades?teacherId={TEACHER['id']}&studentId=102", headers=teacher_headers)

    grades = response.json()
    assert len(grades) == 3
    science = next(g for g in grades if g["subject"] == "Science")
    assert science["percentage"] == 70
    assert science["letterGrade"] == "C-"


def test_parent_cannot_read_teacher_grades(client: TestClient, parent_headers):
    response = client.get(f"/api/grades?teacherId={TEACHER['id']}", headers=parent_headers)
    assert response.status_code == 403


def test_add_grade(client: TestClient, teacher_headers):
    response = client.post("/api/grades", headers=teacher_headers, json={
        "studentId": 101,
        "subject": "Math",
        "assignmentName": "Decimals Quiz",
        "score": 18,
        "maxScore": 20,
        "date": "2023-06-08",
    })

    assert response.status_code == 201, response.text
    grade = response.json()
    assert grade["id"] == 7
    assert grade["teacherId"] == TEACHER["id"]
    assert grade["percentage"] == 90
    assert grade["letterGrade"] == "A-"


def test_add_grade_requires_fields(client: TestClient, teacher_headers):
    response = client.post("/api/grades", headers=teacher_headers, json={"studentId": 101, "subject": "Math"})
    assert response.status_code == 400
    assert response.json()["message"] == "Required fields missing"


def test_parent_cannot_add_grade(client: TestClient, parent_headers):
    response = client.post("/api/grades", headers=parent_headers, json={
        "studentId": 101, "subject": "Math", "assignmentName": "Self-graded", "score": 100, "maxScore": 100,
    })
    assert response.status_code == 403


def test_update_grade(client: TestClient, teacher_headers):
    response = client.put("/api/grades/5", headers=teacher_headers, json={"score": 88, "comments": None})

    assert response.status_code == 200, response.text
    grade = response.json()
    assert grade["score"] == 88
    assert grade["letterGrade"] == "B+"
    assert grade["comments"] is None
    assert grade["subject"] == "Science"


def test_update_unknown_grade(client: TestClient, teacher_headers):
    response = client.put("/api/grades/999", headers=teacher_headers, json={"score": 50})
    assert response.status_code == 404
    assert response.json()["message"] == "Grade not found"
