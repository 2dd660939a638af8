"""Tests for streaks and productivity reports."""

from conftest import make_log

from devlog.services import ProductivityService
from devlog.services.productivity_service import (
    calculate_streak,
    month_bounds,
    shift_day,
    summarize,
    today_string,
)

TODAY = "2024-03-01"


class TestStreak:
    def test_empty(self):
        assert calculate_streak([], TODAY) == 0

    def test_consecutive_days_including_today(self):
        dates = [shift_day(TODAY, -n) for n in range(5)]

        assert calculate_streak(dates, TODAY) == 5

    def test_walk_crosses_month_and_leap_day(self):
        assert calculate_streak(["2024-03-01", "2024-02-29", "2024-02-28"], TODAY) == 3

    def test_gap_truncates(self):
        dates = [TODAY, shift_day(TODAY, -1), shift_day(TODAY, -3)]

        assert calculate_streak(dates, TODAY) == 2

    def test_no_log_today_is_zero(self):
        assert calculate_streak([shift_day(TODAY, -1)], TODAY) == 0

    def test_same_day_logs_count_once(self):
        dates = [TODAY, TODAY, shift_day(TODAY, -1), shift_day(TODAY, -1)]

        assert calculate_streak(dates, TODAY) == 2

    def test_order_does_not_matter(self):
        dates = [shift_day(TODAY, -2), TODAY, shift_day(TODAY, -1)]

        assert calculate_streak(dates, TODAY) == 3


class TestHelpers:
    def test_month_bounds(self):
        assert month_bounds("2024-02") == ("2024-02-01", "2024-02-29")
        assert month_bounds("2023-12") == ("2023-12-01", "2023-12-31")

    def test_summarize(self, developer):
        logs = [
            make_log(
                developer,
                "2024-01-02",
                hours=4,
                minutes=30,
                mood=4,
                blockers="Flaky CI, Waiting for API",
            ),
            make_log(
                developer,
                "2024-01-03",
                hours=3,
                minutes=30,
                mood=2,
                blockers="Flaky CI",
            ),
        ]

        summary = summarize(logs, "2024-01-01", "2024-01-10")

        assert summary["total_logs"] == 2
        assert summary["days_logged"] == 2
        assert summary["total_days"] == 10
        assert summary["completion_rate"] == 20.0
        assert summary["total_hours"] == 8.0
        assert summary["average_hours"] == 4.0
        assert summary["average_mood"] == 3.0
        assert summary["blockers"][0] == {"name": "Flaky CI", "count": 2}

    def test_summarize_empty(self):
        summary = summarize([], "2024-01-01", "2024-01-31")

        assert summary["total_logs"] == 0
        assert summary["average_hours"] == 0
        assert summary["completion_rate"] == 0
        assert summary["daily"] == []


class TestProductivityService:
    def test_range_is_inclusive_and_ascending(self, developer, loner):
        make_log(developer, "2024-01-15")
        make_log(developer, "2024-01-10")
        make_log(developer, "2024-01-20")
        make_log(developer, "2024-01-21")
        make_log(developer, "2024-01-09")
        make_log(loner, "2024-01-12")

        logs = ProductivityService().get_productivity_range(
            developer.id, "2024-01-10", "2024-01-20"
        )

        assert [log.date for log in logs] == ["2024-01-10", "2024-01-15", "2024-01-20"]

    def test_range_without_logs_is_empty(self, developer):
        logs = ProductivityService().get_productivity_range(
            developer.id, "2024-01-01", "2024-01-31"
        )

        assert logs == []

    def test_streak_from_store(self, developer):
        for n in range(3):
            make_log(developer, shift_day(TODAY, -n))
        make_log(developer, shift_day(TODAY, -5))

        assert ProductivityService().get_streak(developer, TODAY) == 3

    def test_dashboard_stats(self, developer):
        make_log(developer, TODAY, hours=8)
        make_log(developer, shift_day(TODAY, -1), hours=6)
        make_log(developer, shift_day(TODAY, -10), hours=4)

        stats = ProductivityService().get_dashboard_stats(developer, TODAY)

        assert stats == {
            "streak": 2,
            "total_logs": 3,
            "average_hours": 6.0,
            "logs_this_week": 2,
            "logged_today": True,
        }


class TestProductivityAPI:
    def test_productivity_range(self, auth_client, developer):
        make_log(developer, "2024-01-12")
        make_log(developer, "2024-01-11")
        make_log(developer, "2024-02-01")

        response = auth_client.get(
            "/api/v1/productivity?start_date=2024-01-01&end_date=2024-01-31"
        )

        assert response.status_code == 200
        data = response.json["data"]
        assert [log["date"] for log in data["logs"]] == ["2024-01-11", "2024-01-12"]
        assert data["summary"]["total_days"] == 31

    def test_productivity_requires_dates(self, auth_client):
        response = auth_client.get("/api/v1/productivity?start_date=2024-01-01")

        assert response.status_code == 400
        assert response.json["error"]["message"] == "end_date is required"

    def test_productivity_rejects_reversed_range(self, auth_client):
        response = auth_client.get(
            "/api/v1/productivity?start_date=2024-02-01&end_date=2024-01-01"
        )

        assert response.status_code == 400

    def test_monthly_report(self, auth_client, developer):
        make_log(developer, "2024-02-10", hours=5, mood=5)
        make_log(developer, "2024-03-01")

        response = auth_client.get("/api/v1/productivity/report?month=2024-02")

        report = response.json["data"]["report"]
        assert report["month"] == "2024-02"
        assert report["total_days"] == 29
        assert report["total_logs"] == 1
        assert report["average_mood"] == 5

    def test_monthly_report_bad_month(self, auth_client):
        response = auth_client.get("/api/v1/productivity/report?month=2024-13")

        assert response.status_code == 400
        assert response.json["error"]["message"] == "Month must be in YYYY-MM format"

    def test_stats(self, auth_client, developer):
        make_log(developer, today_string())

        response = auth_client.get("/api/v1/productivity/stats")

        stats = response.json["data"]["stats"]
        assert stats["streak"] == 1
        assert stats["logged_today"] is True
