import os
import tempfile

# Settings are read at import time; point them at throwaway locations first
_tmp = tempfile.mkdtemp(prefix="finance-tracker-tests-")
os.environ.setdefault("DATA_DIR", os.path.join(_tmp, "data"))
os.environ.setdefault("UPLOADS_DIR", os.path.join(_tmp, "uploads"))
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from finance_tracker import models  # noqa: F401
from finance_tracker.database import Base, get_db
from finance_tracker.main import app
from finance_tracker.services.mailer import MailerError, get_mailer

PASSWORD = "Secret_Pass1"


class FakeMailer:
    """Collects outgoing messages instead of talking to SMTP"""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to, subject, body):
        if self.fail:
            raise MailerError("SMTP unavailable")
        self.sent.append({"to": to, "subject": subject, "body": body})


@pytest.fixture
def db_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(db_session_factory):
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(db_session_factory, mailer):
    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, name="Alice", email="alice@example.com", password=PASSWORD):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return register(client)


@pytest.fixture
def bob(client):
    return register(client, name="Bob", email="bob@example.com")


@pytest.fixture
def alice_headers(alice):
    return auth_headers(alice["token"])


@pytest.fixture
def bob_headers(bob):
    return auth_headers(bob["token"])
