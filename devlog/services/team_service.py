"""Team membership service."""

import logging
import secrets
import string

from devlog import db
from devlog.exceptions import Forbidden, NotFound
from devlog.models import DailyLog, ReviewStatus, Team, User, UserRole

logger = logging.getLogger(__name__)

# Invite code configuration
CODE_PREFIX = "TEAM-"
CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6
MAX_CODE_ATTEMPTS = 20


def normalize_code(code: str) -> str:
    """Invite codes are matched case-insensitively, ignoring padding."""
    return code.strip().upper()


class TeamService:
    """Service for creating teams and managing membership."""

    def generate_code(self) -> str:
        """Generate an invite code not used by any existing team."""
        for _ in range(MAX_CODE_ATTEMPTS):
            code = CODE_PREFIX + "".join(
                secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH)
            )
            if not Team.query.filter_by(code=code).first():
                return code
        raise RuntimeError("Could not generate a unique team code")

    def create_team_for_manager(self, manager: User, name: str | None = None) -> Team:
        """Create the manager's team and bind the manager to it."""
        if not manager.is_manager:
            raise Forbidden("Only managers can own a team")

        if manager.id is None:
            db.session.flush()

        team = Team(
            name=(name or "").strip() or f"{manager.full_name}'s Team",
            code=self.generate_code(),
            manager_id=manager.id,
        )
        db.session.add(team)
        db.session.flush()

        manager.team_id = team.id
        db.session.commit()

        logger.info(f"Team created: {team.code} for manager {manager.id}")
        return team

    def get_team(self, team_id: int) -> Team:
        team = db.session.get(Team, team_id)
        if not team:
            raise NotFound("Team not found")
        return team

    def get_team_by_code(self, code: str) -> Team | None:
        return Team.query.filter_by(code=normalize_code(code)).first()

    def get_user_team(self, user: User) -> Team:
        """Team the user currently belongs to."""
        if not user.team_id:
            raise NotFound("User not in any team")
        return self.get_team(user.team_id)

    def join_team_by_code(self, user: User, code: str) -> Team:
        """Join the team identified by an invite code.

        An existing membership is replaced, except that a team's manager
        stays bound to the team they lead.
        """
        team = self.get_team_by_code(code)
        if not team:
            raise NotFound("Invalid team code")

        if user.team_id and user.team_id != team.id:
            current = self.get_team(user.team_id)
            if current.manager_id == user.id:
                raise Forbidden("A team's manager cannot join another team")

            logger.warning(
                f"User {user.id} switching from team {user.team_id} to {team.id}"
            )

        user.team_id = team.id
        db.session.commit()

        logger.info(f"User {user.id} joined team {team.id}")
        return team

    def leave_team(self, user: User) -> None:
        if not user.team_id:
            raise NotFound("User not in any team")

        team = self.get_team(user.team_id)
        if team.manager_id == user.id:
            raise Forbidden("A team's manager cannot leave their own team")

        user.team_id = None
        db.session.commit()

        logger.info(f"User {user.id} left team {team.id}")

    def list_available_teams(self) -> list[dict]:
        """All teams, for the join picker."""
        teams = Team.query.order_by(Team.name.asc(), Team.id.asc()).all()
        return [team.to_summary_dict() for team in teams]

    def get_team_members(self, team_id: int) -> list[User]:
        return (
            User.query.filter_by(team_id=team_id)
            .order_by(User.full_name.asc(), User.id.asc())
            .all()
        )

    def get_managed_team(self, manager: User) -> Team:
        """The team the manager currently leads."""
        if not manager.is_manager:
            raise Forbidden("Manager access required")
        if not manager.team_id:
            raise Forbidden("Manager not assigned to a team")

        team = self.get_team(manager.team_id)
        if team.manager_id != manager.id:
            raise Forbidden("Only the team's manager can do this")
        return team

    def get_invite_code(self, manager: User) -> str:
        return self.get_managed_team(manager).code

    def remove_member(self, team_id: int, user_id: int, manager: User) -> User:
        """Remove a member from the team; the user account is kept."""
        team = self.get_managed_team(manager)
        if team.id != team_id:
            raise Forbidden("You can only manage your own team")

        member = db.session.get(User, user_id)
        if not member or member.team_id != team.id:
            raise NotFound("Team member not found")
        if member.id == team.manager_id:
            raise Forbidden("The team's manager cannot be removed")

        member.team_id = None
        db.session.commit()

        logger.info(f"User {user_id} removed from team {team.id} by {manager.id}")
        return member

    def get_team_overview(self, manager: User, today: str) -> dict:
        """Dashboard counters for a manager's team."""
        team = self.get_managed_team(manager)
        members = self.get_team_members(team.id)
        developers = [m for m in members if m.role == UserRole.DEVELOPER.value]
        member_ids = [m.id for m in members]

        logs_today = []
        pending_reviews = 0
        if member_ids:
            logs_today = DailyLog.query.filter(
                DailyLog.user_id.in_(member_ids), DailyLog.date == today
            ).all()
            pending_reviews = DailyLog.query.filter(
                DailyLog.user_id.in_(member_ids),
                DailyLog.review_status == ReviewStatus.PENDING.value,
            ).count()

        logged_today = {log.user_id for log in logs_today}
        missing = [d for d in developers if d.id not in logged_today]

        return {
            "team": team.to_dict(),
            "date": today,
            "developers_count": len(developers),
            "logs_today": len(logs_today),
            "pending_reviews": pending_reviews,
            "missing_logs_today": [m.to_dict() for m in missing],
        }
