"""
Exception handlers.

This is the only place where domain errors become HTTP status codes:

    ValidationError        -> 422
    BadRequestError        -> 400
    AuthenticationError    -> 401 (with WWW-Authenticate: Bearer)
    AuthorizationError     -> 403
    NotFoundError          -> 404
    ConflictError          -> 400
    anything else          -> 500, detail withheld from the client

FastAPI's own request validation is split three ways: bad path/query
parameters and undecodable bodies are 400, field constraint failures 422.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    AppError,
    BadRequestError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Checked in order; the first matching base class wins.
_STATUS_BY_ERROR: list[tuple[type[AppError], int]] = [
    (ValidationError, 422),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
]

# Pydantic error types -> constraint names reported to clients
_CONSTRAINTS = {
    "missing": "required",
    "string_too_short": "min_length",
    "string_too_long": "max_length",
    "string_type": "string",
    "greater_than": "gt",
    "greater_than_equal": "gte",
    "less_than": "lt",
    "less_than_equal": "lte",
    "int_parsing": "integer",
    "int_type": "integer",
    "int_from_float": "integer",
    "decimal_parsing": "number",
    "decimal_type": "number",
    "decimal_max_digits": "max_digits",
    "decimal_max_places": "max_decimal_places",
    "decimal_whole_digits": "max_digits",
    "value_error": "format",
}

_PARAM_LOCATIONS = {"path", "query", "header", "cookie"}


def status_for(error: AppError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def field_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """
    Convert pydantic/FastAPI error dicts into ``{field, constraint}`` pairs.

    The leading location ("body", "query", ...) is dropped from the field
    name; nested locations are joined with dots.
    """
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else (loc[0] if loc else "")
        constraint = _CONSTRAINTS.get(error.get("type", ""), error.get("type", "invalid"))
        details.append({"field": field, "constraint": constraint})
    return details


def _is_decode_error(error: Any) -> bool:
    """True for errors about the body as a whole: not JSON, missing, wrong type."""
    loc = tuple(error.get("loc", ()))
    return error.get("type") == "json_invalid" or loc == ("body",)


def translate_request_validation(exc: RequestValidationError) -> AppError:
    """Map FastAPI's request validation failure onto the domain taxonomy."""
    errors = list(exc.errors())

    param_errors = [e for e in errors if e.get("loc", ("",))[0] in _PARAM_LOCATIONS]
    if param_errors:
        return BadRequestError(
            "Invalid request parameters",
            code="INVALID_PARAMETERS",
            details=field_errors(param_errors),
        )

    if any(_is_decode_error(e) for e in errors):
        return BadRequestError("Invalid request body", code="INVALID_BODY")

    return ValidationError(field_errors(errors))


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_for(exc)
    headers = None

    if status_code >= 500:
        logger.error(
            "Internal error on %s %s: %s",
            request.method, request.url.path, exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    logger.info(
        "%s %s -> %d %s",
        request.method, request.url.path, status_code, exc.code,
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = translate_request_validation(exc)
    logger.info(
        "Request validation failed on %s %s: %s",
        request.method, request.url.path, error.code,
    )
    return JSONResponse(status_code=status_for(error), content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method, request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
