"""Utility functions."""

from devlog.utils.response import (
    error_response,
    server_error,
    success_response,
)

__all__ = [
    "success_response",
    "error_response",
    "server_error",
]
