"""Productivity report API endpoints."""

from flask import request

from devlog.api import api_bp
from devlog.schemas import DateRangeQuery, MonthQuery, parse_command
from devlog.services import ProductivityService
from devlog.services.productivity_service import summarize, today_string
from devlog.utils import success_response
from devlog.utils.auth import current_user, login_required


@api_bp.route("/productivity", methods=["GET"])
@login_required
def get_productivity():
    """
    Get own logs within a date range, oldest first.

    Query params:
    - start_date: YYYY-MM-DD (inclusive)
    - end_date: YYYY-MM-DD (inclusive)
    """
    query = parse_command(DateRangeQuery, request.args.to_dict())

    logs = ProductivityService().get_productivity_range(
        current_user().id, query.start_date, query.end_date
    )

    return success_response(
        {
            "logs": [log.to_dict() for log in logs],
            "summary": summarize(logs, query.start_date, query.end_date),
        }
    )


@api_bp.route("/productivity/report", methods=["GET"])
@login_required
def get_monthly_report():
    """
    Monthly report: averages, completion rate, blockers, mood trend.

    Query params:
    - month: YYYY-MM (default current month)
    """
    month = request.args.get("month") or today_string()[:7]
    query = parse_command(MonthQuery, {"month": month})

    report = ProductivityService().get_monthly_report(current_user(), query.month)

    return success_response({"report": report})


@api_bp.route("/productivity/stats", methods=["GET"])
@login_required
def get_dashboard_stats():
    """Streak and headline numbers for the dashboard."""
    stats = ProductivityService().get_dashboard_stats(current_user())
    return success_response({"stats": stats})
