"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException


class LanguageBuddyError(Exception):
    """Base exception for the application."""

    code = "INTERNAL_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(LanguageBuddyError):
    """Input failed schema constraints."""

    code = "VALIDATION_ERROR"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class UnauthorizedError(LanguageBuddyError):
    """No identity could be resolved for the call."""

    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(LanguageBuddyError):
    """Referenced row is absent or owned by another identity."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class EmailAlreadyExistsError(LanguageBuddyError):
    """Raised when attempting to register with an email that already exists."""

    code = "EMAIL_EXISTS"
    status_code = status.HTTP_400_BAD_REQUEST


class PersistenceError(LanguageBuddyError):
    """Storage layer failures."""

    code = "PERSISTENCE_FAULT"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class TransportError(LanguageBuddyError):
    """Failure raised by the HTTP layer before a handler runs."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        status_code: int,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.headers = headers


# Framework status codes that have a matching application error kind
TRANSPORT_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: ValidationError.code,
    status.HTTP_401_UNAUTHORIZED: UnauthorizedError.code,
    status.HTTP_404_NOT_FOUND: NotFoundError.code,
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def error_response(error: LanguageBuddyError) -> JSONResponse:
    """Render an application error as a failure envelope."""

    body: Dict[str, Any] = {"code": error.code, "message": error.message}
    if error.details:
        body["details"] = jsonable_encoder(error.details)
    headers = None
    if isinstance(error, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(error, TransportError):
        headers = error.headers
    return JSONResponse(
        status_code=error.status_code,
        content={"success": False, "error": body},
        headers=headers,
    )


async def handle_application_error(request: Request, exc: LanguageBuddyError) -> JSONResponse:
    if isinstance(exc, (NotFoundError, UnauthorizedError)):
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return error_response(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    error = ValidationError("Validation failed", details={"errors": exc.errors()})
    return error_response(error)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework-level rejections (bad body encoding, unknown route) in the envelope."""

    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    error = TransportError(
        str(exc.detail),
        code=TRANSPORT_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        status_code=exc.status_code,
        headers=exc.headers,
    )
    return error_response(error)


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide storage failures behind a generic persistence fault."""

    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return error_response(
        PersistenceError("Database operation failed. Please try again later.")
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the failure-envelope handlers to ``app``."""

    app.add_exception_handler(LanguageBuddyError, handle_application_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
