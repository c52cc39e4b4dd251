import asyncio
import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

TEST_JWT_SECRET = "test-secret"


class FakeEmailSender:
    """Records sends instead of calling Brevo."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail

    def send_email(self, to_name, to_email, subject, html_body):
        if self.fail:
            raise RuntimeError("brevo unavailable")
        self.sent.append({"to_name": to_name, "to_email": to_email, "subject": subject, "html_body": html_body})
        return {"messageId": str(len(self.sent))}


class FakeAvatarStorage:
    def __init__(self):
        self.uploads = []
        self.ran_on_event_loop = None

    def upload(self, content, user_id):
        try:
            asyncio.get_running_loop()
            self.ran_on_event_loop = True
        except RuntimeError:
            self.ran_on_event_loop = False
        self.uploads.append((user_id, content))
        return f"https://res.cloudinary.com/demo/image/upload/freelance_avatars/user_{user_id}.png"


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    caplog.set_level(logging.DEBUG)
    yield


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=TEST_JWT_SECRET, database_url="sqlite:///:memory:")


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def avatar_storage() -> FakeAvatarStorage:
    return FakeAvatarStorage()


@pytest.fixture
def app(settings, email_sender, avatar_storage):
    return create_app(settings, email_sender=email_sender, avatar_storage=avatar_storage)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(app):
    db = app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------

def unique_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:10]}@loopmid.dev"


def register(client, name: str, email: str, password: str = "secret123", role: str | None = None):
    payload = {"name": name, "email": email, "password": password}
    if role is not None:
        payload["role"] = role
    return client.post("/auth/register", json=payload)


def login(client, email: str, password: str = "secret123"):
    return client.post("/auth/login", json={"email": email, "password": password})


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def signup(client, name: str, role: str | None = None) -> dict:
    """Register and log in; returns the login body plus the auth header."""
    email = unique_email(name.lower())
    resp = register(client, name, email, role=role)
    assert resp.status_code == 201, resp.text
    resp = login(client, email)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    body["email"] = email
    body["headers"] = auth_header(body["access_token"])
    return body


def post_job(client, headers, title="Landing page", description="Build a landing page", budget=500):
    return client.post(
        "/jobs",
        json={"title": title, "description": description, "budget": budget},
        headers=headers,
    )
