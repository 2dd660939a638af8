"""Daily log reminders."""

import logging

from devlog import db
from devlog.exceptions import Forbidden, NotFound
from devlog.models import DailyLog, User, UserRole
from devlog.services.notification_service import reminder_notification
from devlog.services.productivity_service import today_string
from devlog.services.team_service import TeamService
from devlog.utils.email import send_daily_log_reminder

logger = logging.getLogger(__name__)


class ReminderService:
    """Nudge developers who haven't logged today."""

    def get_developers_without_log(self, date: str) -> list[User]:
        logged = db.select(DailyLog.user_id).where(DailyLog.date == date)
        return (
            User.query.filter(
                User.role == UserRole.DEVELOPER.value,
                User.id.notin_(logged),
            )
            .order_by(User.id.asc())
            .all()
        )

    def send_daily_reminders(self, today: str | None = None) -> dict:
        """
        Remind every developer without a log for today.

        Running it twice on the same day reminds twice. Emails are best
        effort; the in-app notifications are committed regardless.
        """
        today = today or today_string()
        users = self.get_developers_without_log(today)
        logger.info(f"Found {len(users)} developers without logs for {today}")

        for user in users:
            reminder_notification(user.id, today)
        db.session.commit()

        emails_sent = 0
        for user in users:
            if send_daily_log_reminder(user.email, user.full_name, today):
                emails_sent += 1

        logger.info(
            f"Daily reminder sweep for {today} done: "
            f"{len(users)} notified, {emails_sent} emails sent"
        )
        return {"date": today, "reminded": len(users), "emails_sent": emails_sent}

    def remind_member(
        self, manager: User, user_id: int, today: str | None = None
    ) -> dict:
        """Manager nudges one member of their team."""
        team = TeamService().get_managed_team(manager)

        member = db.session.get(User, user_id)
        if not member or member.team_id != team.id:
            raise NotFound("Team member not found")
        if member.id == manager.id:
            raise Forbidden("You cannot remind yourself")

        today = today or today_string()
        notification = reminder_notification(member.id, today)
        db.session.commit()

        email_sent = send_daily_log_reminder(member.email, member.full_name, today)
        logger.info(f"Manager {manager.id} reminded user {member.id} for {today}")
        return {"notification": notification.to_dict(), "email_sent": email_sent}
