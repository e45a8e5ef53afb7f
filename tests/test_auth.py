import logging

import pytest
from sqlalchemy.orm import Session

from appointment_booking.models.user import User
from appointment_booking.services.activity_log import ActivityLog

from .conftest import fail_commit, test_user_data, test_login_data

def admin_log(client):
    response = client.get("/api/admin/log")
    assert response.status_code == 200
    return response.json()["log"]

class TestRegistration:

    def test_register_user(self, client):
        """Test user registration."""
        response = client.post("/api/register", json=test_user_data)
        assert response.status_code == 201
        assert response.json()["message"] == "User registered successfully"

    def test_register_logs_activity(self, client):
        client.post("/api/register", json=test_user_data)

        log = admin_log(client)
        assert log[-1]["action"] == "User Registered"
        assert log[-1]["username"] == "alice"
        assert log[-1]["details"] == "User 'alice' (Alice A) registered."

    def test_register_duplicate_username(self, client, db_session):
        """Test registration with duplicate username."""
        client.post("/api/register", json=test_user_data)

        response = client.post("/api/register", json=test_user_data)
        assert response.status_code == 409
        assert response.json()["message"] == "Username already exists"

        assert db_session.query(User).filter(User.username == "alice").count() == 1
        registered = [e for e in ActivityLog(db_session).list_all() if e.action == "User Registered"]
        assert len(registered) == 1

    @pytest.mark.parametrize("missing", ["username", "password", "fullname"])
    def test_register_missing_field(self, client, db_session, missing):
        payload = dict(test_user_data)
        payload.pop(missing)

        response = client.post("/api/register", json=payload)
        assert response.status_code == 400
        assert "required" in response.json()["message"]
        assert db_session.query(User).count() == 0

    def test_register_empty_field(self, client):
        payload = dict(test_user_data, fullname="")
        response = client.post("/api/register", json=payload)
        assert response.status_code == 400

    def test_password_is_not_stored_in_plain_text(self, client, db_session):
        client.post("/api/register", json=test_user_data)

        user = db_session.query(User).filter(User.username == "alice").one()
        assert user.password_hash != test_user_data["password"]
        assert user.full_name == "Alice A"

    def test_invalid_json_payload(self, client):
        response = client.post(
            "/api/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid JSON payload"

    def test_rejected_payload_values_are_not_logged(self, client, caplog):
        caplog.set_level(logging.DEBUG, logger="appointment_booking.main")

        response = client.post("/api/register", json=dict(test_user_data, password=987654321))
        assert response.status_code == 400

        assert "Rejected payload on /api/register" in caplog.text
        assert "987654321" not in caplog.text

    def test_failed_commit_registers_nobody(self, client, db_session, monkeypatch):
        monkeypatch.setattr(Session, "commit", fail_commit)
        response = client.post("/api/register", json=test_user_data)
        monkeypatch.undo()

        assert response.status_code == 500
        assert response.json()["message"] == "Storage failure, the request was not saved"
        assert db_session.query(User).count() == 0
        assert admin_log(client) == []

class TestLogin:

    def test_login_success(self, client):
        """Test successful login."""
        client.post("/api/register", json=test_user_data)

        response = client.post("/api/login", json=test_login_data)
        assert response.status_code == 200

        data = response.json()
        assert data["message"] == "Login successful"
        assert len(data["token"]) == 64
        int(data["token"], 16)

        assert admin_log(client)[-1]["action"] == "User Login"

    def test_login_wrong_password(self, client):
        """Test login with wrong password."""
        client.post("/api/register", json=test_user_data)

        response = client.post("/api/login", json=dict(test_login_data, password="wrong"))
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["message"] == "Invalid username or password"

        last = admin_log(client)[-1]
        assert last["action"] == "Login Failed"
        assert last["username"] == "alice"

    def test_login_unknown_user_is_logged(self, client):
        response = client.post("/api/login", json={"username": "mallory", "password": "x"})
        assert response.status_code == 401

        last = admin_log(client)[-1]
        assert last["action"] == "Login Failed"
        assert last["username"] == "mallory"
        assert last["details"] == "Failed login attempt for user 'mallory'."

    def test_login_missing_fields(self, client):
        response = client.post("/api/login", json={"username": "alice"})
        assert response.status_code == 400
        assert admin_log(client) == []

    def test_concurrent_logins_get_independent_tokens(self, client, sessions):
        client.post("/api/register", json=test_user_data)

        first = client.post("/api/login", json=test_login_data).json()["token"]
        second = client.post("/api/login", json=test_login_data).json()["token"]

        assert first != second
        assert sessions.validate(first) == "alice"
        assert sessions.validate(second) == "alice"

    def test_failed_commit_issues_no_token(self, client, sessions, monkeypatch):
        client.post("/api/register", json=test_user_data)

        monkeypatch.setattr(Session, "commit", fail_commit)
        response = client.post("/api/login", json=test_login_data)
        monkeypatch.undo()

        assert response.status_code == 500
        assert "token" not in response.json()
        assert len(sessions) == 0
        assert [e["action"] for e in admin_log(client)] == ["User Registered"]

class TestLogout:

    def test_logout(self, client, auth_headers):
        """Test user logout."""
        response = client.post("/api/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Logged out successfully"

        assert admin_log(client)[-1]["action"] == "User Logout"

        response = client.get("/api/appointments", headers=auth_headers)
        assert response.status_code == 401

    def test_logout_without_token(self, client):
        response = client.post("/api/logout")
        assert response.status_code == 200
        assert response.json()["message"] == "No active session or already logged out"
        assert admin_log(client) == []

    def test_logout_twice(self, client, auth_headers):
        client.post("/api/logout", headers=auth_headers)

        response = client.post("/api/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "No active session or already logged out"

        logouts = [e for e in admin_log(client) if e["action"] == "User Logout"]
        assert len(logouts) == 1

    def test_logout_keeps_other_sessions(self, client, sessions):
        client.post("/api/register", json=test_user_data)
        first = client.post("/api/login", json=test_login_data).json()["token"]
        second = client.post("/api/login", json=test_login_data).json()["token"]

        client.post("/api/logout", headers={"Authorization": f"Bearer {first}"})

        assert sessions.validate(first) is None
        assert sessions.validate(second) == "alice"

class TestProtectedRoutes:

    @pytest.mark.parametrize("path", ["/api/records", "/api/bills", "/api/appointments", "/api/blockchain"])
    def test_requires_token(self, client, path):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Missing or invalid token"

    def test_rejects_unknown_token(self, client):
        response = client.get("/api/records", headers={"Authorization": "Bearer invalid_token"})
        assert response.status_code == 401

    def test_rejects_non_bearer_scheme(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ")[1]
        response = client.get("/api/records", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

if __name__ == "__main__":
    pytest.main([__file__])
