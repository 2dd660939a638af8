"""Daily log lifecycle.

A log is created ``pending``. Only the review workflow can move it to
``reviewed``; any content edit of a reviewed log moves it back to
``pending`` and clears the review so that an approval always refers to the
content currently stored.
"""

import logging

from devlog import db
from devlog.exceptions import Forbidden, NotFound
from devlog.models import DailyLog, NotificationType, Team, User
from devlog.schemas import CreateDailyLogCommand, UpdateDailyLogCommand
from devlog.services.notification_service import LogEvent, NotificationService

logger = logging.getLogger(__name__)


def team_manager_id(user: User) -> int | None:
    """Manager who should hear about this user's logs, if any."""
    if not user.team_id:
        return None
    team = db.session.get(Team, user.team_id)
    if not team or team.manager_id == user.id:
        return None
    return team.manager_id


class DailyLogService:
    """Create, read, update and delete daily logs."""

    def __init__(self, notifications: NotificationService | None = None):
        self.notifications = notifications or NotificationService()

    def _load(self, log_id: int) -> DailyLog:
        log = db.session.get(DailyLog, log_id)
        if not log:
            raise NotFound("Log not found")
        return log

    def create(self, author: User, command: CreateDailyLogCommand) -> DailyLog:
        log = DailyLog(
            user_id=author.id,
            date=command.date,
            tasks=command.tasks,
            hours=command.hours,
            minutes=command.minutes,
            mood=command.mood,
            blockers=command.blockers,
        )
        db.session.add(log)
        db.session.flush()

        manager_id = team_manager_id(author)
        if manager_id:
            self.notifications.dispatch(
                LogEvent(NotificationType.LOG_SUBMITTED, log, author, manager_id)
            )

        db.session.commit()

        logger.info(f"Daily log {log.id} created by user {author.id} for {log.date}")
        return log

    def get(self, log_id: int, caller: User) -> DailyLog:
        """Visible to its author and to a manager of the author's team."""
        log = self._load(log_id)
        if log.user_id == caller.id:
            return log

        if not caller.is_manager or not caller.team_id:
            raise Forbidden("You don't have access to this log")

        author = db.session.get(User, log.user_id)
        if not author or not caller.shares_team_with(author):
            raise Forbidden("You don't have access to this log")
        return log

    def update(
        self, log_id: int, author: User, command: UpdateDailyLogCommand
    ) -> DailyLog:
        log = self._load(log_id)
        if log.user_id != author.id:
            raise Forbidden("You can only edit your own logs")

        for field, value in command.changes().items():
            setattr(log, field, value)

        if log.is_reviewed:
            log.reset_review()

            manager_id = team_manager_id(author)
            if manager_id:
                self.notifications.dispatch(
                    LogEvent(NotificationType.LOG_RE_EDITED, log, author, manager_id)
                )
            logger.info(f"Daily log {log.id} edited after review, review reset")

        db.session.commit()
        return log

    def delete(self, log_id: int, author: User) -> None:
        log = self._load(log_id)
        if log.user_id != author.id:
            raise Forbidden("You can only delete your own logs")

        db.session.delete(log)
        db.session.commit()

        logger.info(f"Daily log {log_id} deleted by user {author.id}")

    def list_for_user(self, user: User) -> list[DailyLog]:
        """Own logs, newest date first."""
        return (
            DailyLog.query.filter_by(user_id=user.id)
            .order_by(DailyLog.date.desc(), DailyLog.id.desc())
            .all()
        )

    def list_for_team(self, manager: User) -> list[DailyLog]:
        """Logs of every member of the manager's team, newest date first."""
        if not manager.is_manager:
            raise Forbidden("Manager access required")
        if not manager.team_id:
            raise Forbidden("Manager not assigned to a team")

        return (
            DailyLog.query.join(User, DailyLog.user_id == User.id)
            .filter(User.team_id == manager.team_id)
            .order_by(DailyLog.date.desc(), DailyLog.id.desc())
            .all()
        )
