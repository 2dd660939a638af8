"""Tests for request validation."""

import pytest

from devlog.exceptions import ValidationError
from devlog.schemas import (
    CreateDailyLogCommand,
    DateRangeQuery,
    RegisterCommand,
    UpdateDailyLogCommand,
    parse_command,
)

VALID_LOG = {
    "date": "2024-01-10",
    "tasks": "  Fixed bugs  ",
    "hours": 3,
    "minutes": 30,
    "mood": 4,
}


class TestParseCommand:
    def test_valid_log(self):
        command = parse_command(CreateDailyLogCommand, {**VALID_LOG, "blockers": " "})

        assert command.tasks == "Fixed bugs"
        assert command.blockers is None

    def test_body_must_be_object(self):
        with pytest.raises(ValidationError) as exc:
            parse_command(CreateDailyLogCommand, ["not", "a", "dict"])

        assert exc.value.message == "Request body is required"

    def test_first_failing_field_message(self):
        with pytest.raises(ValidationError) as exc:
            parse_command(
                CreateDailyLogCommand, {**VALID_LOG, "date": "bad", "mood": 9}
            )

        assert exc.value.message == "Date must be in YYYY-MM-DD format"
        assert set(exc.value.details) == {"date", "mood"}
        assert exc.value.status_code == 400

    @pytest.mark.parametrize(
        "field,value",
        [("hours", -1), ("hours", 25), ("minutes", -1), ("minutes", 60), ("mood", 6)],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            parse_command(CreateDailyLogCommand, {**VALID_LOG, field: value})

    def test_missing_field(self):
        body = dict(VALID_LOG)
        del body["tasks"]

        with pytest.raises(ValidationError) as exc:
            parse_command(CreateDailyLogCommand, body)

        assert exc.value.message == "tasks is required"

    def test_short_password(self):
        with pytest.raises(ValidationError) as exc:
            parse_command(
                RegisterCommand,
                {
                    "email": "a@example.com",
                    "password": "123",
                    "confirm_password": "123",
                    "full_name": "A",
                    "role": "developer",
                },
            )

        assert "password" in exc.value.details

    def test_bad_email(self):
        with pytest.raises(ValidationError) as exc:
            parse_command(
                RegisterCommand,
                {
                    "email": "not-an-email",
                    "password": "123456",
                    "confirm_password": "123456",
                    "full_name": "A",
                    "role": "developer",
                },
            )

        assert "email" in exc.value.details

    def test_date_range_order(self):
        with pytest.raises(ValidationError) as exc:
            parse_command(
                DateRangeQuery, {"start_date": "2024-02-01", "end_date": "2024-01-01"}
            )

        assert exc.value.message == "start_date must not be after end_date"


class TestUpdateCommand:
    def test_changes_only_sent_fields(self):
        command = parse_command(UpdateDailyLogCommand, {"mood": 2})

        assert command.changes() == {"mood": 2}

    def test_null_content_is_ignored(self):
        command = parse_command(UpdateDailyLogCommand, {"tasks": None, "hours": 4})

        assert command.changes() == {"hours": 4}

    def test_blockers_can_be_cleared(self):
        command = parse_command(UpdateDailyLogCommand, {"blockers": None})

        assert command.changes() == {"blockers": None}

    def test_validates_sent_fields(self):
        with pytest.raises(ValidationError):
            parse_command(UpdateDailyLogCommand, {"date": "2024-13-01"})


class TestStrictFields:
    @pytest.mark.parametrize("value", ["2024-01- 1", "２０２４-01-10", "2024-1-10"])
    def test_date_must_be_ascii_digits(self, value):
        with pytest.raises(ValidationError) as exc:
            parse_command(CreateDailyLogCommand, {**VALID_LOG, "date": value})

        assert exc.value.message == "Date must be in YYYY-MM-DD format"

    def test_date_range_rejects_padded_day(self):
        with pytest.raises(ValidationError):
            parse_command(
                DateRangeQuery, {"start_date": "2024-01- 1", "end_date": "2024-01-10"}
            )

    @pytest.mark.parametrize(
        "field,value",
        [("hours", True), ("hours", "3"), ("minutes", 30.0), ("mood", "4")],
    )
    def test_numbers_are_not_coerced(self, field, value):
        with pytest.raises(ValidationError) as exc:
            parse_command(CreateDailyLogCommand, {**VALID_LOG, field: value})

        assert field in exc.value.details

    def test_update_numbers_are_not_coerced(self):
        with pytest.raises(ValidationError):
            parse_command(UpdateDailyLogCommand, {"mood": True})
