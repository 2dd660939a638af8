"""Authentication API endpoints."""

import logging

from flask import current_app, request
from flask_jwt_extended import create_access_token

from devlog import db
from devlog.api import api_bp
from devlog.exceptions import NotFound, Unauthenticated, ValidationError
from devlog.extensions import limiter
from devlog.models import User, UserRole
from devlog.schemas import LoginCommand, RegisterCommand, parse_command
from devlog.services import TeamService
from devlog.utils import success_response
from devlog.utils.auth import current_user, login_required

logger = logging.getLogger(__name__)


def _token_payload(user: User) -> dict:
    # Identity must be a string for Flask-JWT-Extended
    return {
        "user": user.to_dict(),
        "token": create_access_token(identity=str(user.id)),
    }


@api_bp.route("/auth/register", methods=["POST"])
def register():
    """
    Register a developer or manager.

    Request body:
    {
        "email": "dev@example.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "full_name": "Ada Lovelace",
        "role": "developer",        // or "manager"
        "team_code": "TEAM-AB12CD", // optional, developers only
        "team_name": "Platform"     // optional, managers only
    }

    Managers get a new team; developers may join one with an invite code.
    """
    command = parse_command(RegisterCommand, request.get_json(silent=True))
    email = command.email.lower()

    if User.query.filter_by(email=email).first():
        raise ValidationError("Email already registered", {"email": "taken"})

    team_service = TeamService()
    team = None
    if command.role == UserRole.DEVELOPER.value and command.team_code:
        team = team_service.get_team_by_code(command.team_code)
        if not team:
            raise NotFound("Invalid team code")

    user = User(
        email=email,
        full_name=command.full_name,
        role=command.role,
        team_id=team.id if team else None,
    )
    user.set_password(command.password)
    db.session.add(user)
    db.session.flush()

    if user.is_manager:
        team = team_service.create_team_for_manager(user, command.team_name)
    else:
        db.session.commit()

    logger.info(f"User registered: {user.id} ({user.role})")

    data = _token_payload(user)
    data["team"] = team.to_dict() if team else None
    return success_response(data, status_code=201)


@api_bp.route("/auth/login", methods=["POST"])
@limiter.limit(lambda: current_app.config["LOGIN_RATE_LIMIT"])
def login():
    """
    Log in with email and password.

    Request body:
    {
        "email": "dev@example.com",
        "password": "secret1"
    }
    """
    command = parse_command(LoginCommand, request.get_json(silent=True))

    user = User.query.filter_by(email=command.email.lower()).first()
    if not user or not user.check_password(command.password):
        raise Unauthenticated("Invalid email or password")

    return success_response(_token_payload(user))


@api_bp.route("/auth/me", methods=["GET"])
@login_required
def get_current_user():
    """Get current authenticated user."""
    user = current_user()
    return success_response(
        {
            "user": user.to_dict(),
            "team": user.team.to_dict() if user.team else None,
        }
    )
