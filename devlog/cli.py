"""CLI commands for Flask application."""

import click
from flask.cli import with_appcontext

from devlog.schemas import validate_date_string


@click.group()
def reminders():
    """Daily log reminder commands."""
    pass


@reminders.command()
@click.option(
    "--date",
    default=None,
    help="Day to check as YYYY-MM-DD (default: today, UTC)",
)
@with_appcontext
def send(date):
    """Remind developers who have not logged the given day."""
    from devlog.services import ReminderService

    if date:
        try:
            date = validate_date_string(date)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--date")

    result = ReminderService().send_daily_reminders(today=date)

    click.echo(
        f"{result['date']}: reminded {result['reminded']} developer(s), "
        f"{result['emails_sent']} email(s) sent"
    )


def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(reminders)
