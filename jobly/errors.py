# errors.py
"""Domain errors raised by the accessors and mapped to HTTP responses in `jobly.main`."""

from __future__ import annotations

from typing import Any


class JoblyError(Exception):
    status_code: int = 500

    def __init__(self, message: Any = "Internal Server Error", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(JoblyError):
    """Invalid argument: empty payloads, unknown filters, malformed values."""

    status_code = 400

    def __init__(self, message: Any = "Bad Request") -> None:
        super().__init__(message)


class ConflictError(BadRequestError):
    """A unique row or relation edge already exists."""

    def __init__(self, message: Any = "Duplicate") -> None:
        super().__init__(message)


class NotFoundError(JoblyError):
    status_code = 404

    def __init__(self, message: Any = "Not Found") -> None:
        super().__init__(message)


class UnauthorizedError(JoblyError):
    status_code = 401

    def __init__(self, message: Any = "Unauthorized") -> None:
        super().__init__(message)
