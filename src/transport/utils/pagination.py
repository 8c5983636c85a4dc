"""Page/limit → offset/limit conversion for list endpoints."""

import math
from typing import Any

from pydantic import BaseModel

from transport.errors import validation_error

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class PageWindow(BaseModel):
    skip: int
    take: int
    page: int
    limit: int


def get_pagination_params(
    page: int | None = None,
    limit: int | None = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageWindow:
    """Clamp page to >= 1 and limit to [1, max_limit]."""
    page = max(1, page if page is not None else 1)
    limit = min(max_limit, max(1, limit if limit is not None else default_limit))
    return PageWindow(skip=(page - 1) * limit, take=limit, page=page, limit=limit)


def calculate_total_pages(total: int, limit: int) -> int:
    if limit < 1:
        raise validation_error("limit must be at least 1")
    return math.ceil(total / limit)


def _int_param(query: dict[str, Any], name: str) -> int | None:
    raw = query.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise validation_error(f"Query parameter '{name}' must be an integer") from e


def pagination_from_query(
    query: dict[str, Any] | None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageWindow:
    """Build a PageWindow from API Gateway ``queryStringParameters``."""
    query = query or {}
    return get_pagination_params(
        _int_param(query, "page"),
        _int_param(query, "limit"),
        default_limit=default_limit,
        max_limit=max_limit,
    )
