"""
Error taxonomy shared by the service layer and the HTTP boundary.

Services raise these where the failure is detected; the handlers installed by
``register_exception_handlers`` turn every failure into the response envelope
``{"success": false, "message": ..., "data": ...}``.
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None, data: Any = None, headers: Optional[dict] = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.default_message,
            headers=headers,
        )
        self.data = data


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class DependentRecordsError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Cannot delete a record that has dependent records"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, data={"reason": "dependent_records"})


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ValidationFailedError(AppError):
    """Field-level validation failure detected after schema parsing."""

    status_code = 422
    default_message = "Validation failed"

    def __init__(self, errors: List[dict], message: Optional[str] = None):
        super().__init__(message, data={"errors": errors})
        self.errors = errors


def field_error(field: str, message: str) -> dict:
    return {"field": field, "message": message}


def _format_validation_errors(exc: RequestValidationError) -> List[dict]:
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix FastAPI puts on every location
        location = [str(part) for part in error.get("loc", ())[1:]]
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(field_error(".".join(location), message))
    return errors


def _envelope(message: str, data: Any = None) -> dict:
    return {"success": False, "message": message, "data": data}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        data = getattr(exc, "data", None)
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == status.HTTP_404_NOT_FOUND and not isinstance(exc, AppError):
            message = f"Route {request.url.path} not found"
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(message, data),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_envelope("Validation failed", {"errors": _format_validation_errors(exc)}),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope("Internal server error"),
        )
