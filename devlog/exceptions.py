"""Domain errors raised by services and translated into API responses."""


class DevlogError(Exception):
    """Base class for expected, client-facing failures."""

    code = "ERROR"
    status_code = 400

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DevlogError):
    """Malformed input: bad date, out-of-range numbers, empty tasks."""

    code = "VALIDATION_ERROR"
    status_code = 400


class Unauthenticated(DevlogError):
    """No valid session or credentials."""

    code = "UNAUTHORIZED"
    status_code = 401


class Forbidden(DevlogError):
    """Ownership, role or team-membership violation."""

    code = "FORBIDDEN"
    status_code = 403


class NotFound(DevlogError):
    code = "NOT_FOUND"
    status_code = 404
