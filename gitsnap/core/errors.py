"""
Exception hierarchy for the snapshot service.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages, and every error body
carries `ok: false` to mirror the `{ok, data}` success envelope.
"""
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from gitsnap.core.logging import logger


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class SnapshotServiceError(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"ok": False, "code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class MissingParameterError(SnapshotServiceError):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "MISSING_PARAMETER"

    def __init__(self, name: str):
        super().__init__(
            message=f"Query parameter '{name}' is required.",
            details={"parameter": name},
        )


class SnapshotNotFoundError(SnapshotServiceError):
    http_status = status.HTTP_404_NOT_FOUND
    code = "SNAPSHOT_NOT_FOUND"

    def __init__(self, message_id: str):
        super().__init__(
            message=f"No snapshot recorded for message {message_id}.",
            details={"message_id": message_id},
        )


class StorageError(SnapshotServiceError):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORAGE_ERROR"

    def __init__(self, message: str = "Snapshot storage is unavailable."):
        super().__init__(message=message)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def service_exception_handler(
    request: Request, exc: SnapshotServiceError
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "ok": False,
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled exception",
        extra={"method": request.method, "url_path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "ok": False,
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )
