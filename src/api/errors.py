"""Translation of request binding failures into HTTP 400 responses.

FastAPI reports binding failures as 422; this service answers 400 with a body
naming the offending parameter, or a generic body error for request payloads.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models import ErrorResponse

logger = logging.getLogger(__name__)

_PARAMETER_LOCATIONS = {"query", "path", "header", "cookie"}

# pydantic error type -> type name reported to the caller
_EXPECTED_TYPES = {
    "int_parsing": "int",
    "int_from_float": "int",
    "int_type": "int",
    "greater_than_equal": "int",
    "less_than_equal": "int",
}

JSON_CONTENT_TYPES = ("application/json",)


def _parameter_error(error: dict) -> ErrorResponse:
    loc = error.get("loc", ())
    name = str(loc[1]) if len(loc) > 1 else str(loc[0])
    if error.get("type") == "missing":
        return ErrorResponse(
            error="Missing required parameter",
            parameter=name,
            message=f"Required parameter '{name}' is not present",
        )
    expected = _EXPECTED_TYPES.get(error.get("type"), "unknown")
    return ErrorResponse(
        error="Invalid parameter type",
        parameter=name,
        message=f"Parameter '{name}' must be of type {expected}",
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc", ())

    if loc and loc[0] in _PARAMETER_LOCATIONS:
        body = _parameter_error(first)
    else:
        body = ErrorResponse(
            error="Malformed request body",
            message=first.get("msg", "Request body could not be read"),
        )

    logger.info("Request binding failed", extra={
        "path": request.url.path,
        "error": body.error,
        "parameter": body.parameter,
    })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


def require_json_body(request: Request) -> None:
    """Route dependency rejecting body-carrying requests that are not JSON."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in JSON_CONTENT_TYPES or media_type.endswith("+json"):
        return
    raise HTTPException(
        status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        detail=f"Content type '{content_type or 'none'}' not supported",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
