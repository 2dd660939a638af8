"""Business logic services."""

from devlog.services.daily_log_service import DailyLogService
from devlog.services.notification_service import LogEvent, NotificationService
from devlog.services.productivity_service import ProductivityService
from devlog.services.reminder_service import ReminderService
from devlog.services.review_service import ReviewService
from devlog.services.team_service import TeamService

__all__ = [
    "DailyLogService",
    "LogEvent",
    "NotificationService",
    "ProductivityService",
    "ReminderService",
    "ReviewService",
    "TeamService",
]
