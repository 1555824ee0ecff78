"""Exception handlers rendering errors as structured JSON.

Every error response has the shape::

    {"timestamp": ..., "status": 409, "error": "Conflict",
     "message": "...", "type": "DUPLICATE_EMAIL"}
"""

from datetime import datetime
from http import HTTPStatus
from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from roster.domain.error import (
    DomainError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)


def error_response(
    status_code: int, error_type: str, message: str, **extra: Any
) -> JSONResponse:
    """Build a structured error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now().isoformat(),
            "status": status_code,
            "error": HTTPStatus(status_code).phrase,
            "message": message,
            "type": error_type,
            **extra,
        },
    )


def _field_errors(errors: list[dict[str, Any]]) -> dict[str, str]:
    """Map field path to message, dropping the body/path/query prefix."""
    field_errors: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        field_errors[".".join(loc) or "request"] = error.get("msg", "Invalid value")
    return field_errors


async def handle_duplicate_email(
    request: Request, exc: DuplicateEmailError
) -> JSONResponse:
    logfire.warn("Duplicate email", path=request.url.path, email=exc.email)
    return error_response(status.HTTP_409_CONFLICT, "DUPLICATE_EMAIL", str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn("Resource not found", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_404_NOT_FOUND, "RESOURCE_NOT_FOUND", str(exc))


async def handle_domain_validation(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logfire.warn("Domain validation failed", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_FAILED", str(exc))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Domain error", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR", str(exc))


async def handle_request_validation(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    field_errors = _field_errors(list(exc.errors()))
    logfire.warn(
        "Request validation failed", path=request.url.path, fields=sorted(field_errors)
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_FAILED",
        "Validation failed",
        fieldErrors=field_errors,
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    # Details stay in the logs
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Starlette picks the handler of the closest class in the exception's MRO,
    so specific domain errors win over ``DomainError``.
    """
    app.add_exception_handler(DuplicateEmailError, handle_duplicate_email)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(PydanticValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
