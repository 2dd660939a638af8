"""Notification dispatch and inbox management."""

import logging
from dataclasses import dataclass

from devlog import db
from devlog.exceptions import Forbidden, NotFound
from devlog.models import DailyLog, Notification, NotificationType, User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEvent:
    """Something happened to a daily log that someone should hear about."""

    type: NotificationType
    log: DailyLog
    actor: User
    recipient_id: int


def _render(event: LogEvent) -> tuple[str, str]:
    """Title and message for an event."""
    log = event.log
    actor = event.actor.full_name

    if event.type == NotificationType.LOG_SUBMITTED:
        return (
            "New Log Submitted",
            f"{actor} has submitted a daily log for {log.date}",
        )
    if event.type == NotificationType.LOG_REVIEWED:
        return (
            "Log Reviewed",
            f"Your log for {log.date} has been reviewed by {actor}",
        )
    if event.type == NotificationType.LOG_RE_EDITED:
        return (
            "Log Re-edited",
            f"{actor} has re-edited their log for {log.date} "
            f"and requires re-review",
        )
    raise ValueError(f"Unsupported log event: {event.type}")


def reminder_notification(user_id: int, date: str) -> Notification:
    """Add a daily reminder notification to the session."""
    return Notification.create(
        user_id,
        NotificationType.LOG_REMINDER,
        "Daily Log Reminder",
        f"Don't forget to submit your daily log for {date}!",
    )


class NotificationService:
    """Turns domain events into notifications and manages the inbox."""

    def dispatch(self, event: LogEvent) -> Notification:
        """Record a notification for the event.

        The notification joins the caller's session, so it is committed
        together with the state change that produced it.
        """
        title, message = _render(event)
        notification = Notification.create(
            event.recipient_id, event.type, title, message
        )
        logger.info(
            f"Notification {event.type.value} queued for user {event.recipient_id} "
            f"(log {event.log.id})"
        )
        return notification

    def list_for_user(self, user_id: int) -> list[Notification]:
        """Newest first."""
        return (
            Notification.query.filter_by(user_id=user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )

    def unread_count(self, user_id: int) -> int:
        return Notification.query.filter_by(user_id=user_id, read=False).count()

    def mark_as_read(self, notification_id: int, user: User) -> Notification:
        notification = db.session.get(Notification, notification_id)
        if not notification:
            raise NotFound("Notification not found")
        if notification.user_id != user.id:
            raise Forbidden("You can only update your own notifications")

        notification.read = True
        db.session.commit()
        return notification

    def mark_all_as_read(self, user: User) -> int:
        updated = Notification.query.filter_by(user_id=user.id, read=False).update(
            {"read": True}
        )
        db.session.commit()
        return updated
