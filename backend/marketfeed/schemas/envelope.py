"""JSON envelopes wrapped around every HTTP response."""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from marketfeed.schemas.market import Pagination

T = TypeVar("T")


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T
    timestamp: str = Field(default_factory=utc_timestamp)
    cached: bool = Field(default=False, description="True when served from the in-process response cache")
    pagination: Pagination | None = None


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. EXTERNAL_API_ERROR")
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail
    timestamp: str = Field(default_factory=utc_timestamp)
