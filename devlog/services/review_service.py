"""Manager review workflow for daily logs."""

import logging

from devlog import db
from devlog.exceptions import Forbidden, NotFound
from devlog.models import DailyLog, NotificationType, User
from devlog.services.notification_service import LogEvent, NotificationService
from devlog.utils.email import send_log_reviewed_email

logger = logging.getLogger(__name__)


class ReviewService:
    """Attach manager feedback to logs and finalize reviews."""

    def __init__(self, notifications: NotificationService | None = None):
        self.notifications = notifications or NotificationService()

    def review(
        self, log_id: int, manager: User, feedback: str, mark_reviewed: bool
    ) -> DailyLog:
        """
        Save feedback on a team member's log.

        With ``mark_reviewed`` the log becomes ``reviewed`` and the author is
        notified; without it the feedback is stored as a draft and the log
        stays ``pending``.
        """
        if not manager.is_manager:
            raise Forbidden("Manager access required")

        log = db.session.get(DailyLog, log_id)
        if not log:
            raise NotFound("Log not found")

        if not manager.team_id:
            raise Forbidden("Manager not assigned to a team")

        author = db.session.get(User, log.user_id)
        if not author or not manager.shares_team_with(author):
            raise Forbidden("This log doesn't belong to your team")

        notify_author = mark_reviewed and author.id != manager.id

        if mark_reviewed:
            log.mark_reviewed(manager.id, feedback)
        else:
            log.save_feedback(feedback)

        if notify_author:
            self.notifications.dispatch(
                LogEvent(NotificationType.LOG_REVIEWED, log, manager, author.id)
            )

        db.session.commit()

        logger.info(
            f"Log {log.id} {'reviewed' if mark_reviewed else 'feedback saved'} "
            f"by manager {manager.id}"
        )

        if notify_author:
            send_log_reviewed_email(
                author.email, author.full_name, log.date, manager.full_name
            )

        return log
