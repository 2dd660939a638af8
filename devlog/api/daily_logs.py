"""Daily log API endpoints."""

from flask import request

from devlog.api import api_bp
from devlog.schemas import (
    CreateDailyLogCommand,
    ReviewCommand,
    UpdateDailyLogCommand,
    parse_command,
)
from devlog.services import DailyLogService, ReviewService
from devlog.utils import success_response
from devlog.utils.auth import current_user, login_required, manager_required


@api_bp.route("/daily-logs", methods=["POST"])
@login_required
def create_daily_log():
    """
    Submit a daily log.

    Request body:
    {
        "date": "2024-01-10",
        "tasks": "Implemented login form",
        "hours": 3,         // 0-24
        "minutes": 30,      // 0-59
        "mood": 4,          // 1-5
        "blockers": "Waiting for API, Flaky CI"   // optional
    }
    """
    command = parse_command(CreateDailyLogCommand, request.get_json(silent=True))

    log = DailyLogService().create(current_user(), command)

    return success_response({"log": log.to_dict()}, status_code=201)


@api_bp.route("/daily-logs", methods=["GET"])
@login_required
def get_daily_logs():
    """Get current user's logs, newest date first."""
    logs = DailyLogService().list_for_user(current_user())
    return success_response({"logs": [log.to_dict() for log in logs]})


@api_bp.route("/daily-logs/<int:log_id>", methods=["GET"])
@login_required
def get_daily_log(log_id: int):
    """Get a log visible to the author or a manager of the author's team."""
    log = DailyLogService().get(log_id, current_user())
    return success_response({"log": log.to_dict(include_user=True)})


@api_bp.route("/daily-logs/<int:log_id>", methods=["PUT"])
@login_required
def update_daily_log(log_id: int):
    """
    Update own log. Any field of the create body may be sent.

    Editing a reviewed log sends it back for review.
    """
    command = parse_command(UpdateDailyLogCommand, request.get_json(silent=True))

    log = DailyLogService().update(log_id, current_user(), command)

    return success_response({"log": log.to_dict()})


@api_bp.route("/daily-logs/<int:log_id>", methods=["DELETE"])
@login_required
def delete_daily_log(log_id: int):
    """Delete own log permanently."""
    DailyLogService().delete(log_id, current_user())
    return success_response(message="Log deleted")


@api_bp.route("/daily-logs/<int:log_id>/review", methods=["POST"])
@manager_required
def review_daily_log(log_id: int):
    """
    Review a team member's log.

    Request body:
    {
        "feedback": "Good work",
        "mark_reviewed": true   // false saves feedback and keeps it pending
    }
    """
    command = parse_command(ReviewCommand, request.get_json(silent=True))

    log = ReviewService().review(
        log_id, current_user(), command.feedback, command.mark_reviewed
    )

    return success_response({"log": log.to_dict()})


@api_bp.route("/team-logs", methods=["GET"])
@manager_required
def get_team_logs():
    """
    Get logs of all members of the manager's team, with their authors.

    Query params:
    - status: pending or reviewed (optional)
    """
    logs = DailyLogService().list_for_team(current_user())

    status = request.args.get("status")
    if status:
        logs = [log for log in logs if log.review_status == status]

    return success_response({"logs": [log.to_dict(include_user=True) for log in logs]})
