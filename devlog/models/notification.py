"""In-app notification model."""

from datetime import datetime
from enum import Enum

from devlog import db


class NotificationType(str, Enum):
    """Notification type enum."""

    LOG_SUBMITTED = "log_submitted"
    LOG_REVIEWED = "log_reviewed"
    LOG_RE_EDITED = "log_re_edited"
    LOG_REMINDER = "log_reminder"


class Notification(db.Model):
    """An event record directed at one user."""

    __tablename__ = "notifications"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type = db.Column(db.String(30), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    read = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(
        db.DateTime, default=datetime.utcnow, nullable=False, index=True
    )

    @classmethod
    def create(
        cls,
        user_id: int,
        notification_type: str | NotificationType,
        title: str,
        message: str,
    ) -> "Notification":
        """Create a new notification and add it to the session."""
        if isinstance(notification_type, NotificationType):
            notification_type = notification_type.value

        notification = cls(
            user_id=user_id,
            type=notification_type,
            title=title,
            message=message,
            read=False,
        )
        db.session.add(notification)
        return notification

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "read": self.read,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<Notification {self.id}: {self.type} -> {self.user_id}>"
