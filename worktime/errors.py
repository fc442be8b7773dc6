from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class ApiError(Exception):
    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message

    def extra_payload(self) -> dict[str, Any]:
        return {}


class MissingTokenError(ApiError):
    def __init__(self) -> None:
        super().__init__(
            status_code=400,
            code="MISSING_TOKEN",
            message="Token is required",
        )


class InvalidTargetError(ApiError):
    def __init__(self, message: str = "productiveHours must be a positive number") -> None:
        super().__init__(
            status_code=400,
            code="INVALID_PRODUCTIVE_HOURS",
            message=message,
        )


class UpstreamError(ApiError):
    """Non-2xx answer from the attendance API, passed through verbatim."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            status_code=status_code,
            code="UPSTREAM_ERROR",
            message="Upstream API Error",
        )
        self.body = body

    def extra_payload(self) -> dict[str, Any]:
        return {"details": self.body}


def get_request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        return str(request_id)
    return "unknown"


def error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    payload: dict[str, Any] = {
        "error": message,
        "code": code,
        "request_id": get_request_id(request),
    }
    if extra:
        payload.update(extra)
    return JSONResponse(status_code=status_code, content=payload)
