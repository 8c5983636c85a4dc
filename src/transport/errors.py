"""
Application errors for the transport booking backend.

All expected failures are raised as a single ``AppError`` tagged with an
``ErrorKind``. The kind decides the default HTTP status; callers may still
supply their own status for the generic ``APP`` kind.

Usage:
    from transport.errors import not_found_error, ErrorKind

    raise not_found_error("Vehicle")  # "Vehicle not found", 404
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error kinds understood by the response layer."""

    APP = "APP"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    UNAUTHORIZED = "UNAUTHORIZED"
    CONFLICT = "CONFLICT"


DEFAULT_STATUS: dict[ErrorKind, int] = {
    ErrorKind.APP: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.CONFLICT: 409,
}


class AppError(Exception):
    """An expected, client-facing failure."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.APP,
        status_code: int | None = None,
        is_operational: bool = True,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code if status_code is not None else DEFAULT_STATUS[kind]
        self.is_operational = is_operational
        super().__init__(message)

    def __repr__(self) -> str:
        return f"AppError({self.kind.value}, {self.status_code}, {self.message!r})"


def not_found_error(resource: str) -> AppError:
    return AppError(f"{resource} not found", ErrorKind.NOT_FOUND)


def validation_error(message: str) -> AppError:
    return AppError(message, ErrorKind.VALIDATION)


def unauthorized_error(message: str = "Unauthorized") -> AppError:
    return AppError(message, ErrorKind.UNAUTHORIZED)


def conflict_error(message: str) -> AppError:
    return AppError(message, ErrorKind.CONFLICT)
