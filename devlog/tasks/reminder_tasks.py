"""Daily log reminder tasks."""

import structlog

from devlog.celery_app import celery

logger = structlog.get_logger()


@celery.task(bind=True, max_retries=3, default_retry_delay=60)
def send_daily_reminders(self, date: str | None = None):
    """Notify and email every developer without a log for the day."""
    from devlog import db
    from devlog.services import ReminderService

    try:
        logger.info("daily_reminders_started", date=date)
        result = ReminderService().send_daily_reminders(today=date)
        logger.info("daily_reminders_completed", **result)
        return result

    except Exception as e:
        db.session.rollback()
        logger.error("daily_reminders_error", date=date, error=str(e))
        raise self.retry(exc=e)
