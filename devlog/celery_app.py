"""Celery application configuration."""

import os

from celery import Celery
from celery.schedules import crontab

# Create Celery app
celery = Celery(
    "devlog",
    broker=os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/1"),
    backend=os.environ.get("CELERY_RESULT_BACKEND", "redis://localhost:6379/1"),
    include=["devlog.tasks.reminder_tasks"],
)

# Celery configuration
celery.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,
    task_soft_time_limit=240,
    task_acks_late=True,
    result_expires=3600,
    broker_connection_retry_on_startup=True,
)


def reminder_schedule(hour: int, minute: int) -> dict:
    """Beat entry for the daily missing-log sweep."""
    return {
        "send-daily-log-reminders": {
            "task": "devlog.tasks.reminder_tasks.send_daily_reminders",
            "schedule": crontab(hour=hour, minute=minute),
        }
    }


def init_celery(app):
    """Initialize Celery with Flask app context."""
    celery.conf.update(
        beat_schedule=reminder_schedule(
            app.config["REMINDER_HOUR_UTC"], app.config["REMINDER_MINUTE_UTC"]
        )
    )

    class ContextTask(celery.Task):
        """Task that runs within Flask app context."""

        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery.Task = ContextTask
    return celery
