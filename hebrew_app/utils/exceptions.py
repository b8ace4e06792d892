"""Domain exceptions and their HTTP translation."""
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger


class HebrewAppError(Exception):
    """Base exception for the application."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(HebrewAppError):
    """Request data is well-formed JSON but violates a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(HebrewAppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(HebrewAppError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(HebrewAppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HebrewAppError):
    status_code = status.HTTP_409_CONFLICT


def _error_body(message: str, details: Dict[str, Any] | None = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"detail": message}
    if details:
        body["details"] = details
    return body


async def handle_app_error(request: Request, error: HebrewAppError) -> JSONResponse:
    """Render a domain error with the status code its class maps to."""

    if error.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {error.message}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {error.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, AuthenticationError) else None
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(error.message, error.details),
        headers=headers,
    )


def _field_name(location: tuple) -> str:
    parts = [str(part) for part in location if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def handle_request_validation_error(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    """Report the first offending field as a 400 with a readable message."""

    errors = error.errors()
    if errors:
        first = errors[0]
        message = f"{_field_name(tuple(first.get('loc', ())))}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.warning(f"Validation error on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message, "errors": jsonable_errors(errors)},
    )


def jsonable_errors(errors: list) -> list:
    return [
        {"loc": list(item.get("loc", ())), "msg": item.get("msg"), "type": item.get("type")}
        for item in errors
    ]


async def handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
    """Last-resort handler: log the traceback and hide internals from clients."""

    logger.opt(exception=error).error(
        f"Unhandled error on {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
