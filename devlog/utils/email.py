"""Outgoing email helpers.

Mail is a soft collaborator: when MAIL_SERVER is not configured delivery is
skipped with a log line, and SMTP failures are logged and reported as
``False`` so the write that triggered the email is never affected.
"""

import logging
import smtplib
from email.message import EmailMessage

from flask import current_app

logger = logging.getLogger(__name__)


def is_mail_configured() -> bool:
    return bool(current_app.config.get("MAIL_SERVER"))


def send_email(to: str, subject: str, html: str, text: str | None = None) -> bool:
    """
    Send an email.

    Args:
        to: Recipient address
        subject: Subject line
        html: HTML body
        text: Optional plain-text alternative

    Returns:
        True if the message was handed to the SMTP server, False otherwise
    """
    if not is_mail_configured():
        logger.info(f"Mail not configured, skipping email to {to}: {subject}")
        return False

    config = current_app.config
    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = config.get("MAIL_DEFAULT_SENDER") or config.get("MAIL_USERNAME")
    message["To"] = to
    message.set_content(text or "Open this message in an HTML capable client.")
    message.add_alternative(html, subtype="html")

    smtp_class = smtplib.SMTP_SSL if config.get("MAIL_USE_SSL") else smtplib.SMTP
    try:
        with smtp_class(
            config["MAIL_SERVER"],
            config.get("MAIL_PORT", 587),
            timeout=config.get("MAIL_TIMEOUT", 10),
        ) as server:
            if config.get("MAIL_USE_TLS") and not config.get("MAIL_USE_SSL"):
                server.starttls()
            if config.get("MAIL_USERNAME"):
                server.login(config["MAIL_USERNAME"], config.get("MAIL_PASSWORD", ""))
            server.send_message(message)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email to {to}: {e}")
        return False

    logger.info(f"Email sent to {to}: {subject}")
    return True


def send_daily_log_reminder(email: str, full_name: str, date: str) -> bool:
    """Remind a developer that today's log is missing."""
    app_url = current_app.config.get("APP_URL", "")
    html = (
        f"<h2>Daily Log Reminder</h2>"
        f"<p>Hi {full_name},</p>"
        f"<p>We noticed you haven't submitted your daily log for {date} yet. "
        f"Don't forget to track your tasks, time spent, mood and any blockers.</p>"
        f'<p><a href="{app_url}">Submit your daily log</a></p>'
        f"<p>If you've already submitted your log, please ignore this email.</p>"
    )
    text = (
        f"Hi {full_name},\n\n"
        f"This is a reminder to submit your daily log for {date}.\n"
        f"{app_url}\n"
    )
    return send_email(
        email, "DevLog Reminder: Don't Forget Your Daily Log!", html, text
    )


def send_log_reviewed_email(
    email: str, full_name: str, date: str, manager_name: str
) -> bool:
    """Tell a developer their log has been reviewed."""
    app_url = current_app.config.get("APP_URL", "")
    html = (
        f"<h2>Log Reviewed</h2>"
        f"<p>Hi {full_name},</p>"
        f"<p>{manager_name} has reviewed your daily log for {date} "
        f"and provided feedback.</p>"
        f'<p><a href="{app_url}/my-logs">View feedback</a></p>'
    )
    return send_email(email, f"Your daily log for {date} has been reviewed", html)
