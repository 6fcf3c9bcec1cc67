"""Error types surfaced at the API boundary."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TaskError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"error": self.message}


class ValidationError(TaskError):
    """Malformed or missing client input. Never mutates the store."""

    status_code = 400


class NotFoundError(TaskError):
    """Well-formed identifier with no matching task."""

    status_code = 404


class InternalError(TaskError):
    """Unexpected persistence failure, reported without internal detail."""

    status_code = 500


async def task_error_handler(_: Request, exc: TaskError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(_: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
