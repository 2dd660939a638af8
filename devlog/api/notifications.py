"""Notification API endpoints."""

from devlog.api import api_bp
from devlog.services import NotificationService
from devlog.utils import success_response
from devlog.utils.auth import current_user, login_required


@api_bp.route("/notifications", methods=["GET"])
@login_required
def get_notifications():
    """Get current user's notifications, newest first."""
    user = current_user()
    service = NotificationService()

    notifications = service.list_for_user(user.id)

    return success_response(
        {
            "notifications": [n.to_dict() for n in notifications],
            "unread_count": service.unread_count(user.id),
        }
    )


@api_bp.route("/notifications/<int:notification_id>/read", methods=["PUT"])
@login_required
def mark_notification_read(notification_id: int):
    """Mark one of the current user's notifications as read."""
    notification = NotificationService().mark_as_read(notification_id, current_user())
    return success_response({"notification": notification.to_dict()})


@api_bp.route("/notifications/read-all", methods=["PUT"])
@login_required
def mark_all_notifications_read():
    """Mark every notification of the current user as read."""
    updated = NotificationService().mark_all_as_read(current_user())
    return success_response({"updated": updated})
