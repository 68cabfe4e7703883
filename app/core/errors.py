"""
Error handling utilities following FastAPI best practices

Every failure leaves the service in the same envelope:
{"success": false, "message": "...", "errors": [{"field": ..., "message": ...}]}
"""

import traceback
from typing import List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import config
from app.core.logger import logger


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    status_code = 400

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationFailed(ErrorResponse):
    """Malformed or missing input"""

    status_code = 400

    def __init__(self, message: str = "Validation error", errors: List[dict] = None):
        super().__init__(message)
        self.errors = errors or []


class Unauthenticated(ErrorResponse):
    """Missing, invalid or expired credentials"""

    status_code = 401


class Forbidden(ErrorResponse):
    """Authenticated but not allowed"""

    status_code = 403


class NotFound(ErrorResponse):
    status_code = 404


class Conflict(ErrorResponse):
    """Duplicate value on a unique field"""

    status_code = 409


class InvalidArgument(ErrorResponse):
    """A cross-entity rule was violated"""

    status_code = 400


class InternalError(ErrorResponse):
    status_code = 500


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    success: bool = False
    message: str
    errors: Optional[List[FieldError]] = None


def envelope(message: str, errors: Optional[List[dict]] = None) -> dict:
    content = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return content


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for custom ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "error_type": type(exc).__name__,
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(exc.message, getattr(exc, "errors", None)),
    )


def _field_path(loc) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request body/query validation failures"""
    errors = [
        {
            "field": _field_path(error.get("loc", ())),
            "message": str(error.get("msg", "Invalid value")).removeprefix("Value error, "),
        }
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        metadata={
            "event": "validation_error",
            "url": str(request.url),
            "method": request.method,
            "fields": [error["field"] for error in errors],
        },
    )

    return JSONResponse(status_code=400, content=envelope("Validation error", errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for Starlette/FastAPI HTTPException, including unmatched routes"""
    message = exc.detail
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Not found - {request.url.path}"

    logger.warning(
        f"HTTPException: {message}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(str(message)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler for anything the service layer did not translate"""
    metadata = {
        "event": "unhandled_exception",
        "url": str(request.url),
        "method": request.method,
    }

    if config.environment == "development":
        # Include more detailed error info in development
        metadata["traceback"] = traceback.format_exc()

    logger.error("Unhandled exception", error=exc, metadata=metadata)

    return JSONResponse(status_code=500, content=envelope("Internal server error"))


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
