"""Database models."""

from devlog.models.daily_log import DailyLog, ReviewStatus
from devlog.models.notification import Notification, NotificationType
from devlog.models.team import Team
from devlog.models.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
    "Team",
    "DailyLog",
    "ReviewStatus",
    "Notification",
    "NotificationType",
]
