"""Streaks and productivity rollups over a user's log history.

All day arithmetic happens on ``YYYY-MM-DD`` strings: dates are converted to
``date`` only to step one calendar day and immediately formatted back, so
no timezone ever takes part in bucketing.
"""

import calendar
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable

from devlog.exceptions import ValidationError
from devlog.models import DailyLog, User

DATE_FORMAT = "%Y-%m-%d"
BLOCKER_SEPARATOR = ", "


def today_string() -> str:
    """Today's calendar day (UTC) as YYYY-MM-DD."""
    return datetime.utcnow().date().isoformat()


def shift_day(day: str, days: int) -> str:
    shifted = datetime.strptime(day, DATE_FORMAT).date() + timedelta(days=days)
    return shifted.isoformat()


def calculate_streak(dates: Iterable[str], today: str | None = None) -> int:
    """
    Count consecutive days ending today that have at least one log.

    Several logs on the same day count once. The walk stops at the first
    day without a log, so a log missing today means a streak of 0.
    """
    logged_days = set(dates)
    if not logged_days:
        return 0

    expected = today or today_string()
    streak = 0
    while expected in logged_days:
        streak += 1
        expected = shift_day(expected, -1)
    return streak


def month_bounds(month: str) -> tuple[str, str]:
    """First and last calendar day of a YYYY-MM month."""
    year, month_number = (int(part) for part in month.split("-"))
    last_day = calendar.monthrange(year, month_number)[1]
    return (
        date(year, month_number, 1).isoformat(),
        date(year, month_number, last_day).isoformat(),
    )


def days_between(start_date: str, end_date: str) -> int:
    """Inclusive number of calendar days in the range."""
    start = datetime.strptime(start_date, DATE_FORMAT).date()
    end = datetime.strptime(end_date, DATE_FORMAT).date()
    return (end - start).days + 1


def summarize(logs: list[DailyLog], start_date: str, end_date: str) -> dict:
    """Derived display stats for the logs of one range."""
    total_days = days_between(start_date, end_date)
    logs = [log for log in logs if start_date <= log.date <= end_date]
    count = len(logs)
    days_logged = len({log.date for log in logs})

    total_hours = sum(log.total_hours for log in logs)
    total_mood = sum(log.mood for log in logs)

    blockers = Counter()
    for log in logs:
        if log.blockers:
            for blocker in log.blockers.split(BLOCKER_SEPARATOR):
                blocker = blocker.strip()
                if blocker:
                    blockers[blocker] += 1

    return {
        "start_date": start_date,
        "end_date": end_date,
        "total_logs": count,
        "days_logged": days_logged,
        "total_days": total_days,
        "completion_rate": (
            round(days_logged / total_days * 100, 1) if total_days else 0
        ),
        "total_hours": round(total_hours, 2),
        "average_hours": round(total_hours / count, 2) if count else 0,
        "average_mood": round(total_mood / count, 2) if count else 0,
        "blockers": [
            {"name": name, "count": n} for name, n in blockers.most_common()
        ],
        "daily": [
            {"date": log.date, "hours": round(log.total_hours, 2), "mood": log.mood}
            for log in sorted(logs, key=lambda log: log.date)
        ],
    }


class ProductivityService:
    """Read-only reporting over persisted logs."""

    def get_productivity_range(
        self, user_id: int, start_date: str, end_date: str
    ) -> list[DailyLog]:
        """Logs dated within [start_date, end_date], oldest first."""
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date")

        return (
            DailyLog.query.filter(
                DailyLog.user_id == user_id,
                DailyLog.date >= start_date,
                DailyLog.date <= end_date,
            )
            .order_by(DailyLog.date.asc(), DailyLog.id.asc())
            .all()
        )

    def get_streak(self, user: User, today: str | None = None) -> int:
        dates = [
            row.date
            for row in DailyLog.query.with_entities(DailyLog.date)
            .filter(DailyLog.user_id == user.id)
            .all()
        ]
        return calculate_streak(dates, today)

    def get_monthly_report(self, user: User, month: str) -> dict:
        start_date, end_date = month_bounds(month)
        logs = self.get_productivity_range(user.id, start_date, end_date)
        report = summarize(logs, start_date, end_date)
        report["month"] = month
        return report

    def get_dashboard_stats(self, user: User, today: str | None = None) -> dict:
        """Headline numbers for the developer dashboard."""
        today = today or today_string()
        logs = DailyLog.query.filter_by(user_id=user.id).all()
        week_start = shift_day(today, -6)

        count = len(logs)
        return {
            "streak": calculate_streak((log.date for log in logs), today),
            "total_logs": count,
            "average_hours": (
                round(sum(log.total_hours for log in logs) / count, 2) if count else 0
            ),
            "logs_this_week": len(
                {log.date for log in logs if week_start <= log.date <= today}
            ),
            "logged_today": any(log.date == today for log in logs),
        }
