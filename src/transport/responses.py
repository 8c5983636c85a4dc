"""
API Gateway proxy responses wrapped in the standard envelope.

Every response body is ``{"success": bool, "data"?, "error"?, "message"?}``.
Handlers return one of the builders below, and ``api_handler`` turns any
exception they raise into an error envelope.
"""

import json
import logging
from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any

import pydantic
from pydantic_core import to_json
from sqlalchemy.exc import IntegrityError

from transport.config import get_config
from transport.errors import AppError
from transport.models.api import FieldError, PaginationMeta
from transport.utils.pagination import PageWindow, calculate_total_pages

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any], object], dict[str, Any]]

_HEADERS = {"Content-Type": "application/json"}

# PostgreSQL SQLSTATE codes and SQLite extended result names
_UNIQUE_VIOLATION_CODES = frozenset({"23505", "SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"})
_FOREIGN_KEY_VIOLATION_CODES = frozenset({"23503", "SQLITE_CONSTRAINT_FOREIGNKEY"})


def _json_response(envelope: dict[str, Any], status: int) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": dict(_HEADERS),
        "body": to_json(envelope, by_alias=True).decode(),
    }


def success_response(data: Any, message: str | None = None, status: int = 200) -> dict[str, Any]:
    envelope: dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        envelope["message"] = message
    return _json_response(envelope, status)


def paginated_response(
    items: Sequence[Any],
    window: PageWindow,
    total: int,
    message: str | None = None,
) -> dict[str, Any]:
    envelope: dict[str, Any] = {
        "success": True,
        "data": list(items),
        "pagination": PaginationMeta(
            page=window.page,
            limit=window.limit,
            total=total,
            total_pages=calculate_total_pages(total, window.limit),
        ),
    }
    if message is not None:
        envelope["message"] = message
    return _json_response(envelope, 200)


def error_response(error: str, status: int = 400) -> dict[str, Any]:
    return _json_response({"success": False, "error": error}, status)


def validation_error_response(errors: Sequence[FieldError], status: int = 422) -> dict[str, Any]:
    return _json_response(
        {"success": False, "error": "Validation Error", "data": {"errors": list(errors)}},
        status,
    )


def field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    return [
        FieldError(field=".".join(str(part) for part in err["loc"]) or "body", message=err["msg"])
        for err in exc.errors()
    ]


def integrity_error_code(exc: IntegrityError) -> str | None:
    """Structured constraint code reported by the database driver, if any."""
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "sqlite_errorname", None)


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode a proxy event's JSON body; an empty body is an empty object."""
    raw = event.get("body") or "{}"
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise AppError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise AppError("Request body must be a JSON object")
    return body


def api_handler(fn: Handler) -> Handler:
    """Map anything a handler raises onto an error envelope."""

    @wraps(fn)
    def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
        try:
            return fn(event, context)
        except AppError as e:
            logger.warning("API error %s (%d): %s", e.kind.value, e.status_code, e.message)
            return error_response(e.message, e.status_code)
        except pydantic.ValidationError as e:
            logger.warning("Request validation failed: %d error(s)", e.error_count())
            return validation_error_response(field_errors(e))
        except IntegrityError as e:
            code = integrity_error_code(e)
            logger.warning("Integrity error (code=%s): %s", code, e.orig)
            if code in _UNIQUE_VIOLATION_CODES:
                return error_response("Resource already exists", 409)
            if code in _FOREIGN_KEY_VIOLATION_CODES:
                return error_response("Invalid reference to related resource", 400)
            return _internal_error(e)
        except Exception as e:
            logger.exception("Unhandled API error")
            return _internal_error(e)

    return wrapper


def _internal_error(exc: Exception) -> dict[str, Any]:
    if get_config().is_production:
        return error_response("Internal server error", 500)
    return error_response(str(exc) or type(exc).__name__, 500)
