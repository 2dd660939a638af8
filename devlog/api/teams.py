"""Team API endpoints."""

from flask import request

from devlog.api import api_bp
from devlog.exceptions import Forbidden
from devlog.schemas import JoinTeamCommand, parse_command
from devlog.services import ReminderService, TeamService
from devlog.services.productivity_service import today_string
from devlog.utils import success_response
from devlog.utils.auth import current_user, login_required, manager_required

# ============ Membership ============


@api_bp.route("/teams", methods=["GET"])
@login_required
def get_available_teams():
    """List all teams (id, name, code) for the join picker."""
    return success_response({"teams": TeamService().list_available_teams()})


@api_bp.route("/team/join", methods=["POST"])
@login_required
def join_team():
    """
    Join a team by invite code.

    Request body:
    {
        "code": "TEAM-AB12CD"   // case-insensitive
    }
    """
    command = parse_command(JoinTeamCommand, request.get_json(silent=True))

    team = TeamService().join_team_by_code(current_user(), command.code)

    return success_response(
        {"team": team.to_dict()}, message="Successfully joined team"
    )


@api_bp.route("/team/leave", methods=["POST"])
@login_required
def leave_team():
    """Leave the current team."""
    TeamService().leave_team(current_user())
    return success_response(message="You left the team")


@api_bp.route("/team", methods=["GET"])
@login_required
def get_my_team():
    """Get current user's team."""
    team = TeamService().get_user_team(current_user())
    return success_response({"team": team.to_dict()})


@api_bp.route("/team/members", methods=["GET"])
@login_required
def get_my_team_members():
    """Get members of the current user's team."""
    service = TeamService()
    team = service.get_user_team(current_user())
    members = service.get_team_members(team.id)
    return success_response({"members": [m.to_dict() for m in members]})


# ============ Manager ============


@api_bp.route("/teams/<int:team_id>/members", methods=["GET"])
@manager_required
def get_team_members(team_id: int):
    """Get members of a team led by the current manager."""
    service = TeamService()
    team = service.get_managed_team(current_user())
    if team.id != team_id:
        raise Forbidden("You can only view your own team")

    members = service.get_team_members(team_id)
    return success_response({"members": [m.to_dict() for m in members]})


@api_bp.route("/team/code", methods=["GET"])
@manager_required
def get_team_code():
    """Get the invite code of the manager's team."""
    return success_response({"code": TeamService().get_invite_code(current_user())})


@api_bp.route("/team/overview", methods=["GET"])
@manager_required
def get_team_overview():
    """Today's counters for the manager dashboard."""
    overview = TeamService().get_team_overview(current_user(), today_string())
    return success_response(overview)


@api_bp.route("/team/members/<int:user_id>", methods=["DELETE"])
@manager_required
def remove_team_member(user_id: int):
    """Remove a member from the manager's team."""
    manager = current_user()
    TeamService().remove_member(manager.team_id, user_id, manager)
    return success_response(message="Team member removed")


@api_bp.route("/team/members/<int:user_id>/remind", methods=["POST"])
@manager_required
def remind_team_member(user_id: int):
    """Send a daily log reminder to one team member."""
    result = ReminderService().remind_member(current_user(), user_id)
    return success_response(result, message="Reminder sent")
