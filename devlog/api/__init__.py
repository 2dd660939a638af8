"""API blueprints."""

import logging

from flask import Blueprint
from werkzeug.exceptions import InternalServerError

from devlog import db
from devlog.exceptions import DevlogError
from devlog.utils.response import error_response, server_error

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(DevlogError)
def handle_domain_error(error: DevlogError):
    db.session.rollback()
    return error_response(
        error.code, error.message, error.details, status_code=error.status_code
    )


@api_bp.app_errorhandler(InternalServerError)
def handle_unexpected_error(error: InternalServerError):
    original = getattr(error, "original_exception", None) or error
    db.session.rollback()
    logger.error(f"Unhandled error: {original!r}")
    return server_error()


from devlog.api import (  # noqa: E402, F401
    auth,
    cron,
    daily_logs,
    notifications,
    productivity,
    teams,
)
