"""Endpoints for the external scheduler."""

import structlog

from devlog.api import api_bp
from devlog.services import ReminderService
from devlog.utils import success_response
from devlog.utils.auth import cron_secret_required

logger = structlog.get_logger()


@api_bp.route("/cron/check-daily-logs", methods=["POST"])
@cron_secret_required
def check_daily_logs():
    """Run the daily reminder sweep.

    Requires ``Authorization: Bearer <CRON_SECRET>``.
    """
    result = ReminderService().send_daily_reminders()
    logger.info("cron_daily_reminders_completed", **result)
    return success_response(result, message="Reminders sent")
