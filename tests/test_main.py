import pydantic
import pytest
from fastapi import HTTPException

from appointment_booking.core.exceptions import (
    AuthError,
    BadRequestError,
    ConflictError,
    NotFoundError,
    StorageError,
)

from .conftest import register_and_login

class TestActivityEndpoints:

    def test_blockchain_only_returns_callers_entries(self, client):
        alice = register_and_login(client, "alice")
        register_and_login(client, "bob", fullname="Bob B")
        client.post("/api/login", json={"username": "bob", "password": "wrong"})

        log = client.get("/api/blockchain", headers=alice).json()["log"]
        assert [e["action"] for e in log] == ["User Registered", "User Login"]
        assert all(e["username"] == "alice" for e in log)

    def test_admin_log_is_full_and_unauthenticated(self, client):
        register_and_login(client, "alice")
        register_and_login(client, "bob", fullname="Bob B")
        client.post("/api/login", json={"username": "bob", "password": "wrong"})

        response = client.get("/api/admin/log")
        assert response.status_code == 200
        log = response.json()["log"]
        assert [(e["username"], e["action"]) for e in log] == [
            ("alice", "User Registered"),
            ("alice", "User Login"),
            ("bob", "User Registered"),
            ("bob", "User Login"),
            ("bob", "Login Failed"),
        ]
        assert set(log[0]) == {"timestamp", "username", "action", "details"}

    def test_admin_log_starts_empty(self, client):
        assert client.get("/api/admin/log").json() == {"log": []}

class TestApplication:

    def test_unknown_api_route(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json()["message"] == "API endpoint not found"

    def test_wrong_method(self, client):
        response = client.get("/api/paybill")
        assert response.status_code == 405
        assert "message" in response.json()

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_process_time_header(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "X-Process-Time" in response.headers

class TestErrorTaxonomy:

    @pytest.mark.parametrize("error, status_code", [
        (BadRequestError, 400),
        (AuthError, 401),
        (NotFoundError, 404),
        (ConflictError, 409),
        (StorageError, 500),
    ])
    def test_status_codes(self, error, status_code):
        assert error().status_code == status_code

    def test_bad_request_is_not_a_pydantic_error(self):
        assert not issubclass(BadRequestError, pydantic.ValidationError)
        assert issubclass(BadRequestError, HTTPException)
