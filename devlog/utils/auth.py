"""Authentication utilities."""

import hmac
from functools import wraps

from flask import current_app, g, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from devlog import db
from devlog.exceptions import Forbidden, Unauthenticated
from devlog.models.user import User
from devlog.utils.response import error_response


def current_user() -> User:
    """User resolved by ``login_required`` for this request."""
    return g.current_user


def login_required(fn):
    """
    Decorator that resolves the JWT identity to a User.

    The user is available as ``current_user()`` inside the view.
    """

    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        user = db.session.get(User, int(get_jwt_identity()))
        if not user:
            raise Unauthenticated("User not found")

        g.current_user = user
        return fn(*args, **kwargs)

    return wrapper


def manager_required(fn):
    """Decorator that requires an authenticated manager."""

    @wraps(fn)
    @login_required
    def wrapper(*args, **kwargs):
        if not current_user().is_manager:
            raise Forbidden("Manager access required")
        return fn(*args, **kwargs)

    return wrapper


def cron_secret_required(fn):
    """Decorator for endpoints called by the external scheduler.

    Expects ``Authorization: Bearer <CRON_SECRET>``.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        secret = current_app.config.get("CRON_SECRET", "")
        header = request.headers.get("Authorization", "")
        if not secret or not hmac.compare_digest(
            header.encode(), f"Bearer {secret}".encode()
        ):
            raise Unauthenticated("Invalid cron secret")
        return fn(*args, **kwargs)

    return wrapper


def register_jwt_handlers(jwt):
    """Render JWT failures in the standard error envelope."""

    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response("UNAUTHORIZED", reason, status_code=401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response("UNAUTHORIZED", reason, status_code=401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response("UNAUTHORIZED", "Token has expired", status_code=401)
