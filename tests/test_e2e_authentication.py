from datetime import timedelta

from fastapi.testclient import TestClient

from school_connect.config.settings import settings
from school_connect.database import db
from school_connect.models import utcnow
from tests.conftest import PARENT, TEACHER, bearer, login


def test_login_returns_user_without_password(client: TestClient):
    """
    Tests that the seeded teacher can log in and that the response never
    exposes the password hash.
    """
    response = client.post("/api/auth/login", json={"email": TEACHER["email"], "password": TEACHER["password"]})

    assert response.status_code == 200, f"Login failed: {response.text}"
    user = response.json()
    assert user["id"] == TEACHER["id"]
    assert user["name"] == "Jane Smith"
    assert user["role"] == "teacher"
    assert "password" not in user
    assert "createdAt" in user and "lastActive" in user
    assert response.cookies.get(settings.SESSION_COOKIE_NAME)


def test_login_email_is_case_insensitive(client: TestClient):
    response = client.post("/api/auth/login", json={"email": "Parent@Example.com", "password": PARENT["password"]})
    assert response.status_code == 200
    assert response.json()["id"] == PARENT["id"]


def test_login_rejects_bad_credentials(client: TestClient):
    wrong_password = client.post("/api/auth/login", json={"email": TEACHER["email"], "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "teacher123"})

    for response in (wrong_password, unknown_email):
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password"}


def test_login_requires_both_fields(client: TestClient):
    response = client.post("/api/auth/login", json={"email": TEACHER["email"]})
    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required"


def test_cookie_session_authenticates_requests(client: TestClient):
    response = client.post("/api/auth/login", json={"email": TEACHER["email"], "password": TEACHER["password"]})
    assert response.status_code == 200

    # The TestClient keeps the session cookie in its jar
    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["email"] == TEACHER["email"]


def test_protected_endpoint_without_session(client: TestClient):
    response = client.get("/api/user")
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_malformed_authorization_header(client: TestClient):
    response = client.get("/api/user", headers={"Authorization": "Token abc"})
    assert response.status_code == 401


def test_unknown_session_token(client: TestClient):
    response = client.get("/api/user", headers=bearer("not-a-session"))
    assert response.status_code == 401


def test_register_creates_parent_by_default(client: TestClient):
    response = client.post("/api/auth/register", json={
        "name": "Sam Parent",
        "email": "sam@example.com",
        "password": "secret1",
    })

    assert response.status_code == 201, response.text
    user = response.json()
    assert user["role"] == "parent"
    assert user["id"] == 3
    assert "password" not in user

    # Registration also logs the new account in
    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["email"] == "sam@example.com"


def test_register_duplicate_email(client: TestClient):
    response = client.post("/api/auth/register", json={
        "name": "Another Jane",
        "email": TEACHER["email"],
        "password": "whatever",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"


def test_register_requires_fields(client: TestClient):
    response = client.post("/api/auth/register", json={"email": "x@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Name, email, and password are required"


def test_register_rejects_unknown_role(client: TestClient):
    response = client.post("/api/auth/register", json={
        "name": "Eve", "email": "eve@example.com", "password": "secret1", "role": "principal",
    })
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_logout_ends_session(client: TestClient):
    token = login(client, TEACHER["email"], TEACHER["password"])

    response = client.post("/api/auth/logout", headers=bearer(token))
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}

    assert client.get("/api/user", headers=bearer(token)).status_code == 401


def test_logout_without_session_still_succeeds(client: TestClient):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200


def test_expired_session_is_rejected_and_evicted(client: TestClient):
    token = login(client, TEACHER["email"], TEACHER["password"])
    assert client.get("/api/user", headers=bearer(token)).status_code == 200

    db.sessions[token].expires_at = utcnow() - timedelta(seconds=1)

    response = client.get("/api/user", headers=bearer(token))
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}
    assert token not in db.sessions


def test_logout_with_malformed_authorization_header(client: TestClient):
    # Log in without clearing the cookie jar
    response = client.post("/api/auth/login", json={"email": TEACHER["email"], "password": TEACHER["password"]})
    token = response.cookies.get(settings.SESSION_COOKIE_NAME)
    assert token

    response = client.post("/api/auth/logout", headers={"Authorization": "Token garbage"})

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}
    # The cookie session was still found and ended
    assert token not in db.sessions
