"""Error handling for the shot API.

Maps the package's exceptions onto the standardized error payload.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bankshot.config import ConfigurationError
from bankshot.core import ShotRequestError

from .models.responses import ErrorCode, ErrorResponse

logger = logging.getLogger(__name__)


def format_error_response(
    error_code: ErrorCode,
    message: str,
    request: Request,
    details: Optional[dict[str, Any]] = None,
) -> ErrorResponse:
    """Format standardized error response.

    Args:
        error_code: Error code identifier
        message: Error message
        request: FastAPI request object
        details: Additional error details

    Returns:
        Formatted error response
    """
    return ErrorResponse(
        error=error_code.value,
        message=message,
        details=details,
        path=str(request.url.path),
        method=request.method,
    )


def _json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def shot_request_error_handler(
    request: Request, exc: ShotRequestError
) -> JSONResponse:
    """Handle structurally invalid shot requests."""
    logger.info(f"Rejected shot request on {request.url.path}: {exc}")
    body = format_error_response(
        ErrorCode.VAL_PARAMETER_OUT_OF_RANGE, str(exc), request, exc.to_dict()
    )
    return _json(400, body)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request bodies and parameters that fail schema validation."""
    # Rejected inputs are left out; NaN and infinity are not valid JSON
    details = {
        "validation_errors": [
            {
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
    }
    body = format_error_response(
        ErrorCode.VAL_INVALID_FORMAT, "Request validation failed", request, details
    )
    return _json(422, body)


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Handle configuration failures."""
    logger.error(f"Configuration error on {request.url.path}: {exc}")
    body = format_error_response(ErrorCode.CONFIG_LOAD_FAILED, str(exc), request)
    return _json(500, body)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    body = format_error_response(
        ErrorCode.SYS_INTERNAL_ERROR,
        "Internal server error",
        request,
        {"exception_type": type(exc).__name__},
    )
    return _json(500, body)


def setup_error_handling(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(ShotRequestError, shot_request_error_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)


__all__ = [
    "format_error_response",
    "shot_request_error_handler",
    "validation_exception_handler",
    "configuration_error_handler",
    "general_exception_handler",
    "setup_error_handling",
]
