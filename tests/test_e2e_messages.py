from fastapi.testclient import TestClient

from tests.conftest import PARENT, TEACHER


def test_get_chat_messages(client: TestClient, parent_headers):
    response = client.get("/api/messages?chatId=101", headers=parent_headers)

    assert response.status_code == 200
    messages = response.json()
    assert [m["id"] for m in messages] == [1, 2, 3]
    assert messages[0]["senderId"] == TEACHER["id"]
    assert messages[2]["read"] is False


def test_get_chat_messages_forbidden_for_non_participant(client: TestClient):
    client.post("/api/auth/register", json={"name": "Outsider", "email": "out@example.com", "password": "secret1"})
    response = client.get("/api/messages?chatId=101")
    assert response.status_code == 403


def test_get_empty_chat(client: TestClient, parent_headers):
    response = client.get("/api/messages?chatId=555", headers=parent_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_send_message_reuses_existing_chat(client: TestClient, parent_headers):
    response = client.post("/api/messages", headers=parent_headers, json={
        "recipientId": TEACHER["id"],
        "content": "Thanks, we'll schedule a tutor.",
    })

    assert response.status_code == 201, response.text
    message = response.json()
    assert message["id"] == 5
    assert message["chatId"] == 101
    assert message["senderId"] == PARENT["id"]
    assert message["type"] == "text"
    assert message["read"] is False

    chat = client.get("/api/messages?chatId=101", headers=parent_headers).json()
    assert chat[-1]["id"] == 5


def test_send_message_opens_new_chat(client: TestClient, teacher_headers):
    response = client.post("/api/messages", headers=teacher_headers, json={
        "recipientId": 42,
        "content": "Welcome to the class!",
    })

    assert response.status_code == 201
    assert response.json()["chatId"] == 103


def test_send_message_requires_content(client: TestClient, parent_headers):
    response = client.post("/api/messages", headers=parent_headers, json={"recipientId": 1, "content": "   "})
    assert response.status_code == 400
    assert response.json()["message"] == "Message content is required"


def test_send_message_requires_recipient(client: TestClient, parent_headers):
    response = client.post("/api/messages", headers=parent_headers, json={"content": "Hello?"})
    assert response.status_code == 400


def test_recent_messages_one_per_chat(client: TestClient, teacher_headers):
    response = client.get(f"/api/messages/recent?userId={TEACHER['id']}", headers=teacher_headers)

    assert response.status_code == 200
    recent = response.json()
    assert [(m["chatId"], m["id"]) for m in recent] == [(102, 4), (101, 3)]


def test_contacts_derived_from_messages(client: TestClient, parent_headers):
    response = client.get(f"/api/messages/contacts?userId={PARENT['id']}", headers=parent_headers)

    assert response.status_code == 200
    contacts = response.json()["contacts"]
    assert len(contacts) == 1
    teacher = contacts[0]
    assert teacher["id"] == TEACHER["id"]
    assert teacher["name"] == "Jane Smith"
    assert teacher["role"] == "teacher"
    assert teacher["unreadCount"] == 1
    assert teacher["lastMessage"].startswith("She's doing well overall")


def test_contacts_of_another_user_forbidden(client: TestClient, parent_headers):
    response = client.get(f"/api/messages/contacts?userId={TEACHER['id']}", headers=parent_headers)
    assert response.status_code == 403


def test_mark_message_as_read(client: TestClient, parent_headers):
    response = client.put("/api/messages/3/read", headers=parent_headers)

    assert response.status_code == 200
    assert response.json()["read"] is True

    contacts = client.get(f"/api/messages/contacts?userId={PARENT['id']}", headers=parent_headers).json()
    assert contacts["contacts"][0]["unreadCount"] == 0


def test_only_recipient_marks_message_read(client: TestClient, teacher_headers):
    response = client.put("/api/messages/3/read", headers=teacher_headers)
    assert response.status_code == 403


def test_mark_unknown_message(client: TestClient, parent_headers):
    response = client.put("/api/messages/999/read", headers=parent_headers)
    assert response.status_code == 404
