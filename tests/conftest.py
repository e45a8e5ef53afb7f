import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

# Set testing environment variables before the application is imported
os.environ["TESTING"] = "1"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

from appointment_booking.main import app
from appointment_booking.api.deps import get_session_registry
from appointment_booking.core.database import get_db, init_db
from appointment_booking.core.security import SessionRegistry

# Test data
test_user_data = {
    "username": "alice",
    "password": "pw123",
    "fullname": "Alice A"
}

test_login_data = {
    "username": "alice",
    "password": "pw123"
}

@pytest.fixture
def db_engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def sessions():
    return SessionRegistry()

@pytest.fixture
def client(session_factory, sessions):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_registry] = lambda: sessions
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()

def register_and_login(client, username="alice", password="pw123", fullname="Alice A"):
    """Register a user and return Authorization headers for a fresh token."""
    client.post(
        "/api/register",
        json={"username": username, "password": password, "fullname": fullname},
    )
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}

@pytest.fixture
def auth_headers(client):
    return register_and_login(client)

def fail_commit(*args, **kwargs):
    """Stand-in for Session.commit that fails like a locked or full disk."""
    raise OperationalError("COMMIT", {}, Exception("disk I/O error"))
