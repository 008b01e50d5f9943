"""JSON response envelopes for the HTTP API."""

from enum import StrEnum
from typing import Any

from fastapi.responses import JSONResponse


class ApiMessage(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"
    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


def success(data: Any = None, status: int = 200, meta: dict | None = None) -> JSONResponse:
    return JSONResponse(
        {"success": True, "data": data, "meta": meta or {}},
        status_code=status,
    )


def error(
    message: ApiMessage | str, status: int = 400, errors: list | None = None
) -> JSONResponse:
    return JSONResponse(
        {"success": False, "message": str(message), "errors": errors or []},
        status_code=status,
    )
