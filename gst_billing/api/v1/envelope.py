# gst_billing/api/v1/envelope.py
"""
Standardized API response envelope used by all v1 endpoints.

Every successful response wraps data in:
    {
        "status": "ok",
        "data": <payload>,
        "message": <optional string>,
        "errors": <optional list of detail dicts>
    }

Failures are raised as ``HTTPException`` and keep FastAPI's ``{"detail": ...}``
body.

Domain results are snake_case dicts; ``camelize`` turns them into the
camelCase keys the document templates and clients read.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard envelope for all v1 API responses."""

    status: str = "ok"
    data: T | None = None
    message: str | None = None
    errors: list[dict[str, Any]] | None = None


def camelize(value: Any) -> Any:
    """Recursively convert dict keys from snake_case to camelCase."""
    if isinstance(value, dict):
        return {to_camel(k) if isinstance(k, str) else k: camelize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [camelize(v) for v in value]
    return value


def ok(data: Any = None, message: str | None = None) -> dict:
    """Build a success response dict."""
    return ApiResponse(status="ok", data=data, message=message).model_dump()
