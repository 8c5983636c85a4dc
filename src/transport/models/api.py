"""Response envelope shapes."""

from typing import Any

from pydantic import BaseModel

from transport.models.base import ApiModel


class FieldError(BaseModel):
    field: str
    message: str


class ApiResponse(ApiModel):
    success: bool
    data: Any = None
    error: str | None = None
    message: str | None = None


class PaginationMeta(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedResponse(ApiResponse):
    data: list[Any] = []
    pagination: PaginationMeta
