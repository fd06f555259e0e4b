import os

import pytest

# Configure the app before it is imported: plain-http cookies and cheap hashing
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from fastapi.testclient import TestClient  # noqa: E402

from school_connect.config.settings import settings  # noqa: E402
from school_connect.database import db  # noqa: E402
from school_connect.main import app  # noqa: E402
from school_connect.realtime.relay import manager  # noqa: E402

TEACHER = {"id": 1, "email": "teacher@example.com", "password": "teacher123"}
PARENT = {"id": 2, "email": "parent@example.com", "password": "parent123"}


def login(client: TestClient, email: str, password: str) -> str:
    """
    Logs in and returns the session token. The cookie jar is cleared
    afterwards so every request in a test states its identity explicitly.
    """
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    if response.status_code != 200:
        pytest.fail(f"Failed to login for tests. Status: {response.status_code}, Response: {response.text}",
                    pytrace=False)
    token = response.cookies.get(settings.SESSION_COOKIE_NAME)
    assert token, "Login response did not set the session cookie"
    client.cookies.clear()
    return token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def fresh_store():
    """Every test starts from the seeded demo data with no open sessions or sockets."""
    db.reset()
    manager.active_connections.clear()
    yield
    manager.active_connections.clear()


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def teacher_headers(client):
    return bearer(login(client, TEACHER["email"], TEACHER["password"]))


@pytest.fixture()
def parent_headers(client):
    return bearer(login(client, PARENT["email"], PARENT["password"]))


@pytest.fixture()
def admin_headers(client):
    response = client.post("/api/auth/register", json={
        "name": "Ada Admin",
        "email": "admin@example.com",
        "password": "admin123",
        "role": "admin",
    })
    assert response.status_code == 201, response.text
    client.cookies.clear()
    return bearer(login(client, "admin@example.com", "admin123"))
