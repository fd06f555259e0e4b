from datetime import date

from fastapi.testclient import TestClient


def test_news_is_public_and_newest_first(client: TestClient):
    response = client.get("/api/news")

    assert response.status_code == 200
    assert [n["id"] for n in response.json()] == [4, 3, 2, 1]


def test_news_filtered_by_category(client: TestClient):
    response = client.get("/api/news?category=announcement")
    assert [n["id"] for n in response.json()] == [3, 1]


def test_recent_announcements(client: TestClient):
    response = client.get("/api/news/recent")

    assert response.status_code == 200
    items = response.json()
    assert [n["id"] for n in items] == [3, 1]
    assert all(n["category"] == "announcement" for n in items)


def test_recent_announcements_capped_at_three(client: TestClient, teacher_headers):
    for title in ("Picture Day", "Book Fair", "Bus Schedule"):
        client.post("/api/news", headers=teacher_headers, json={
            "title": title, "content": "Details inside.", "category": "announcement",
        })

    items = client.get("/api/news/recent").json()
    assert len(items) == 3


def test_teacher_creates_announcement(client: TestClient, teacher_headers):
    response = client.post("/api/news", headers=teacher_headers, json={
        "title": "Science Fair",
        "content": "Projects are due next Friday.",
        "category": "event",
        "featured": True,
    })

    assert response.status_code == 201, response.text
    item = response.json()
    assert item["id"] == 5
    assert item["author"] == "Jane Smith"
    assert item["featured"] is True
    assert item["publishDate"] == date.today().isoformat()


def test_create_announcement_requires_fields(client: TestClient, teacher_headers):
    response = client.post("/api/news", headers=teacher_headers, json={"title": "Empty"})
    assert response.status_code == 400
    assert response.json()["message"] == "Title, content, and category are required"


def test_parent_cannot_create_announcement(client: TestClient, parent_headers):
    response = client.post("/api/news", headers=parent_headers, json={
        "title": "Bake sale", "content": "Cookies!", "category": "event",
    })
    assert response.status_code == 403


def test_create_announcement_requires_login(client: TestClient):
    response = client.post("/api/news", json={"title": "x", "content": "y", "category": "event"})
    assert response.status_code == 401


def test_teacher_edits_own_announcement(client: TestClient, teacher_headers):
    created = client.post("/api/news", headers=teacher_headers, json={
        "title": "Field Day", "content": "Wear sneakers.", "category": "event",
    }).json()

    response = client.put(f"/api/news/{created['id']}", headers=teacher_headers, json={"content": "Wear sneakers and a hat."})
    assert response.status_code == 200
    assert response.json()["content"] == "Wear sneakers and a hat."
    assert response.json()["title"] == "Field Day"


def test_teacher_cannot_edit_someone_elses_announcement(client: TestClient, teacher_headers):
    response = client.put("/api/news/1", headers=teacher_headers, json={"title": "Changed"})
    assert response.status_code == 403


def test_admin_edits_and_deletes_any_announcement(client: TestClient, admin_headers):
    updated = client.put("/api/news/1", headers=admin_headers, json={"featured": False})
    assert updated.status_code == 200
    assert updated.json()["featured"] is False

    deleted = client.delete("/api/news/1", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Announcement deleted successfully"
    assert deleted.json()["announcement"]["id"] == 1

    assert [n["id"] for n in client.get("/api/news").json()] == [4, 3, 2]


def test_delete_unknown_announcement(client: TestClient, admin_headers):
    response = client.delete("/api/news/999", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Announcement not found"
