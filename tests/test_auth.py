"""Authentication API tests."""

from conftest import PASSWORD, client_for

from devlog import db
from devlog.models import Team, User


def register_body(**overrides):
    body = {
        "email": "new@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "full_name": "New Person",
        "role": "developer",
    }
    body.update(overrides)
    return body


class TestRegister:
    """Tests for the registration endpoint."""

    def test_register_developer(self, client):
        response = client.post("/api/v1/auth/register", json=register_body())

        assert response.status_code == 201
        data = response.json["data"]
        assert "token" in data
        assert data["user"]["role"] == "developer"
        assert data["user"]["team_id"] is None
        assert data["team"] is None
        assert "password_hash" not in data["user"]

    def test_register_manager_creates_team(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json=register_body(role="manager", team_name="Backend"),
        )

        assert response.status_code == 201
        data = response.json["data"]
        assert data["team"]["name"] == "Backend"
        assert data["team"]["code"].startswith("TEAM-")
        assert data["user"]["team_id"] == data["team"]["id"]

        team = db.session.get(Team, data["team"]["id"])
        assert team.manager_id == data["user"]["id"]

    def test_register_manager_default_team_name(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json=register_body(role="manager", full_name="Ana"),
        )

        assert response.json["data"]["team"]["name"] == "Ana's Team"

    def test_register_developer_with_team_code(self, client, team):
        response = client.post(
            "/api/v1/auth/register",
            json=register_body(team_code=f"  {team.code.lower()} "),
        )

        assert response.status_code == 201
        assert response.json["data"]["user"]["team_id"] == team.id

    def test_register_invalid_team_code(self, client):
        response = client.post(
            "/api/v1/auth/register", json=register_body(team_code="TEAM-NOPE00")
        )

        assert response.status_code == 404
        assert response.json["error"]["code"] == "NOT_FOUND"
        assert User.query.filter_by(email="new@example.com").first() is None

    def test_register_duplicate_email(self, client, developer):
        response = client.post(
            "/api/v1/auth/register", json=register_body(email=developer.email)
        )

        assert response.status_code == 400
        assert response.json["error"]["code"] == "VALIDATION_ERROR"

    def test_register_password_mismatch(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json=register_body(confirm_password="different1"),
        )

        assert response.status_code == 400
        assert "match" in response.json["error"]["message"]

    def test_register_invalid_role(self, client):
        response = client.post(
            "/api/v1/auth/register", json=register_body(role="admin")
        )

        assert response.status_code == 400
        assert response.json["error"]["details"]["role"]

    def test_register_missing_body(self, client):
        response = client.post("/api/v1/auth/register")

        assert response.status_code == 400
        assert response.json["success"] is False


class TestLogin:
    """Tests for email/password login."""

    def test_login_success(self, client, developer):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": developer.email, "password": PASSWORD},
        )

        assert response.status_code == 200
        assert response.json["data"]["user"]["id"] == developer.id
        assert response.json["data"]["token"]

    def test_login_email_is_case_insensitive(self, client, developer):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": developer.email.upper(), "password": PASSWORD},
        )

        assert response.status_code == 200

    def test_login_wrong_password(self, client, developer):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": developer.email, "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json["error"]["code"] == "UNAUTHORIZED"

    def test_login_unknown_user(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "ghost@example.com", "password": PASSWORD},
        )

        assert response.status_code == 401

    def test_token_from_login_works(self, client, developer):
        token = client.post(
            "/api/v1/auth/login",
            json={"email": developer.email, "password": PASSWORD},
        ).json["data"]["token"]

        response = client.get(
            "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 200
        assert response.json["data"]["user"]["email"] == developer.email


class TestGetCurrentUser:
    """Tests for getting current user."""

    def test_get_me_authenticated(self, auth_client, team):
        response = auth_client.get("/api/v1/auth/me")

        assert response.status_code == 200
        data = response.json["data"]
        assert data["user"]["full_name"] == "Dan Developer"
        assert data["team"]["id"] == team.id

    def test_get_me_unauthenticated(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json["error"]["code"] == "UNAUTHORIZED"

    def test_get_me_invalid_token(self, client):
        response = client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_token_of_deleted_user(self, client, loner):
        user_client = client_for(client, loner)
        db.session.delete(loner)
        db.session.commit()

        response = user_client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json["error"] == {
            "code": "UNAUTHORIZED",
            "message": "User not found",
        }
