"""
Error types raised by the stores and the router, and their HTTP rendering.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RosterApiError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthenticationError(RosterApiError):
    status_code = 401


class UploadError(RosterApiError):
    status_code = 400


class StoreError(RosterApiError):
    """A backing store call failed. The original exception is the __cause__."""

    status_code = 500


def _error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def handle_roster_error(request: Request, exc: RosterApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.info(
            "%s %s rejected (%d): %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


def _is_upload_field(error: dict) -> bool:
    return "image" in error.get("loc", ())


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(_is_upload_field(error) for error in errors):
        message = "No file uploaded"
    else:
        message = "Invalid request body"
    logger.info(
        "%s %s rejected (400): %s", request.method, request.url.path, errors
    )
    return JSONResponse(status_code=400, content=_error_body(message))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content=_error_body("Server error"))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RosterApiError, handle_roster_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
