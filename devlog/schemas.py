"""
Request schemas.

Each model turns a raw JSON body into a typed, already-validated command
that services can trust. `parse_command` maps pydantic failures onto the
domain ValidationError, keeping the first failing field's message.
"""

import re
from datetime import datetime
from typing import Literal, Optional, TypeVar

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    StrictInt,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from devlog.exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

CommandT = TypeVar("CommandT", bound=BaseModel)


def validate_date_string(value: str) -> str:
    """Accept only real calendar days written as YYYY-MM-DD."""
    value = value.strip()
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ValueError("Date must be in YYYY-MM-DD format")
    return value


def _check_tasks(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("Tasks description is required")
    return value.strip()


def _check_hours(value: int) -> int:
    if not 0 <= value <= 24:
        raise ValueError("Hours must be between 0 and 24")
    return value


def _check_minutes(value: int) -> int:
    if not 0 <= value <= 59:
        raise ValueError("Minutes must be between 0 and 59")
    return value


def _check_mood(value: int) -> int:
    if not 1 <= value <= 5:
        raise ValueError("Mood must be an integer between 1 and 5")
    return value


def _clean_blockers(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


# Auth


class RegisterCommand(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    confirm_password: str
    full_name: str
    role: Literal["developer", "manager"]
    team_code: Optional[str] = None
    team_name: Optional[str] = Field(None, max_length=255)

    @field_validator("full_name")
    @classmethod
    def full_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Full name is required")
        return value.strip()

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginCommand(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


# Daily logs


class CreateDailyLogCommand(BaseModel):
    date: str
    tasks: str
    hours: StrictInt
    minutes: StrictInt
    mood: StrictInt
    blockers: Optional[str] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        return validate_date_string(value)

    @field_validator("tasks")
    @classmethod
    def check_tasks(cls, value: str) -> str:
        return _check_tasks(value)

    @field_validator("hours")
    @classmethod
    def check_hours(cls, value: int) -> int:
        return _check_hours(value)

    @field_validator("minutes")
    @classmethod
    def check_minutes(cls, value: int) -> int:
        return _check_minutes(value)

    @field_validator("mood")
    @classmethod
    def check_mood(cls, value: int) -> int:
        return _check_mood(value)

    @field_validator("blockers")
    @classmethod
    def clean_blockers(cls, value: Optional[str]) -> Optional[str]:
        return _clean_blockers(value)


class UpdateDailyLogCommand(BaseModel):
    """Partial update; only fields present in the body are applied."""

    date: Optional[str] = None
    tasks: Optional[str] = None
    hours: Optional[StrictInt] = None
    minutes: Optional[StrictInt] = None
    mood: Optional[StrictInt] = None
    blockers: Optional[str] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, value):
        return None if value is None else validate_date_string(value)

    @field_validator("tasks")
    @classmethod
    def check_tasks(cls, value):
        return None if value is None else _check_tasks(value)

    @field_validator("hours")
    @classmethod
    def check_hours(cls, value):
        return None if value is None else _check_hours(value)

    @field_validator("minutes")
    @classmethod
    def check_minutes(cls, value):
        return None if value is None else _check_minutes(value)

    @field_validator("mood")
    @classmethod
    def check_mood(cls, value):
        return None if value is None else _check_mood(value)

    @field_validator("blockers")
    @classmethod
    def clean_blockers(cls, value):
        return _clean_blockers(value)

    def changes(self) -> dict:
        """Fields explicitly sent by the client.

        Content fields cannot be nulled; blockers can be cleared by sending
        null or an empty string.
        """
        sent = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in sent.items()
            if value is not None or key == "blockers"
        }


class ReviewCommand(BaseModel):
    feedback: str = ""
    mark_reviewed: bool


# Teams


class JoinTeamCommand(BaseModel):
    code: str

    @field_validator("code")
    @classmethod
    def code_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team code is required")
        return value


# Reports


class DateRangeQuery(BaseModel):
    start_date: str
    end_date: str

    @field_validator("start_date", "end_date")
    @classmethod
    def check_dates(cls, value: str) -> str:
        return validate_date_string(value)

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class MonthQuery(BaseModel):
    month: str

    @field_validator("month")
    @classmethod
    def month_format(cls, value: str) -> str:
        try:
            datetime.strptime(value, "%Y-%m")
        except ValueError:
            raise ValueError("Month must be in YYYY-MM format")
        return value


def _error_message(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "body"
    if error.get("type") == "missing":
        return f"{field} is required"
    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, Exception):
        return str(ctx_error)
    return error.get("msg", "Invalid value")


def parse_command(model: type[CommandT], data) -> CommandT:
    """Validate a request body into a command, raising ValidationError."""
    if not isinstance(data, dict):
        raise ValidationError("Request body is required", {"body": "required"})

    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = e.errors()
        details = {}
        for error in errors:
            field = ".".join(str(part) for part in error.get("loc", ())) or "body"
            details.setdefault(field, _error_message(error))
        raise ValidationError(_error_message(errors[0]), details)
