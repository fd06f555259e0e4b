from fastapi.testclient import TestClient

from school_connect.database import db
from tests.conftest import PARENT, TEACHER


def test_get_notifications(client: TestClient, teacher_headers):
    response = client.get(f"/api/notifications?userId={TEACHER['id']}", headers=teacher_headers)

    assert response.status_code == 200
    notifications = response.json()
    assert [n["id"] for n in notifications] == [1, 3]
    assert all(n["userId"] == TEACHER["id"] for n in notifications)


def test_get_notifications_of_another_user_forbidden(client: TestClient, parent_headers):
    response = client.get(f"/api/notifications?userId={TEACHER['id']}", headers=parent_headers)
    assert response.status_code == 403


def test_mark_notification_as_read(client: TestClient, teacher_headers):
    response = client.put("/api/notifications/1/read", headers=teacher_headers)

    assert response.status_code == 200
    assert response.json()["read"] is True


def test_cannot_mark_someone_elses_notification(client: TestClient, parent_headers):
    response = client.put("/api/notifications/1/read", headers=parent_headers)
    assert response.status_code == 403


def test_mark_all_as_read(client: TestClient, teacher_headers):
    response = client.put(f"/api/notifications/read-all?userId={TEACHER['id']}", headers=teacher_headers)

    assert response.status_code == 200
    assert all(n["read"] for n in response.json())
    # The parent's notification is untouched
    assert next(n for n in db.notifications if n.id == 2).user_id == PARENT["id"]


def test_delete_notification(client: TestClient, teacher_headers):
    response = client.delete("/api/notifications/3", headers=teacher_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Notification deleted successfully"
    assert body["notification"]["title"] == "Faculty Meeting"

    remaining = client.get(f"/api/notifications?userId={TEACHER['id']}", headers=teacher_headers).json()
    assert [n["id"] for n in remaining] == [1]


def test_delete_unknown_notification(client: TestClient, teacher_headers):
    response = client.delete("/api/notifications/999", headers=teacher_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Notification not found"


def test_delete_all_notifications(client: TestClient, teacher_headers):
    response = client.delete(f"/api/notifications?userId={TEACHER['id']}", headers=teacher_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "2 notifications deleted successfully"}
    assert [n.id for n in db.notifications] == [2]
