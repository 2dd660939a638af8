"""Pytest configuration and fixtures."""

import pytest
from flask_jwt_extended import create_access_token

from devlog import create_app, db
from devlog.models import DailyLog, User, UserRole
from devlog.services import TeamService

PASSWORD = "secret123"


class AuthenticatedClient:
    """Test client that sends a user's bearer token with every request."""

    def __init__(self, client, headers):
        self._client = client
        self._headers = headers

    def get(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.get(*args, **kwargs)

    def post(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.post(*args, **kwargs)

    def put(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.put(*args, **kwargs)

    def delete(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.delete(*args, **kwargs)


def make_user(email, full_name, role=UserRole.DEVELOPER, team=None):
    user = User(
        email=email,
        full_name=full_name,
        role=role.value,
        team_id=team.id if team else None,
    )
    user.set_password(PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


def make_log(user, date, **fields):
    log = DailyLog(
        user_id=user.id,
        date=date,
        tasks=fields.pop("tasks", "Worked on things"),
        hours=fields.pop("hours", 6),
        minutes=fields.pop("minutes", 0),
        mood=fields.pop("mood", 3),
        **fields,
    )
    db.session.add(log)
    db.session.commit()
    return log


def client_for(client, user):
    token = create_access_token(identity=str(user.id))
    return AuthenticatedClient(client, {"Authorization": f"Bearer {token}"})


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def manager(app):
    """Manager with their own team."""
    user = make_user("manager@example.com", "Maria Manager", role=UserRole.MANAGER)
    TeamService().create_team_for_manager(user, "Platform")
    return user


@pytest.fixture
def team(manager):
    return manager.team


@pytest.fixture
def developer(team):
    """Developer on the manager's team."""
    return make_user("dev@example.com", "Dan Developer", team=team)


@pytest.fixture
def loner(app):
    """Developer without a team."""
    return make_user("solo@example.com", "Sam Solo")


@pytest.fixture
def other_manager(app):
    """Manager of a different team."""
    user = make_user("other@example.com", "Olga Other", role=UserRole.MANAGER)
    TeamService().create_team_for_manager(user, "Mobile")
    return user


@pytest.fixture
def auth_client(client, developer):
    """Client authenticated as the team developer."""
    return client_for(client, developer)


@pytest.fixture
def manager_client(client, manager):
    """Client authenticated as the team manager."""
    return client_for(client, manager)
