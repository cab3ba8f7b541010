"""Exception handlers mapping errors to ``{error_code, message, details}`` bodies."""

from collections.abc import Sequence
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.v1.schemas.common import ErrorResponse
from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()

HTTP_ERROR = "HTTP_ERROR"


def _error_response(
    status_code: int, error_code: str, message: str, details: Any = None
) -> ORJSONResponse:
    body = ErrorResponse(error_code=error_code, message=message, details=details)
    return ORJSONResponse(status_code=status_code, content=body.model_dump())


def _field_path(loc: Sequence[str | int]) -> str:
    """``("body", "address", "city")`` -> ``"address.city"``.

    The leading ``body``/``query``/``path`` segment is dropped so paths line
    up with the dotted keys produced by form validation.
    """
    return ".".join(str(part) for part in loc[1:]) or str(loc[0])


async def app_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    assert isinstance(exc, AppException)
    logger.warning(
        "app_exception",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
    )
    return _error_response(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Unknown routes and disallowed methods from the router."""
    assert isinstance(exc, StarletteHTTPException)
    return _error_response(exc.status_code, HTTP_ERROR, str(exc.detail))


async def request_validation_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Malformed request data: wrong JSON types or missing query values.

    Content rules (required fields, email, coordinates) are checked later by
    the profile service and come back through ``app_exception_handler``.
    """
    assert isinstance(exc, RequestValidationError)
    details = [
        {"field": _field_path(error["loc"]), "message": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info("request_validation_error", fields=[d["field"] for d in details])
    return _error_response(
        422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", details
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=exc,
    )

    message = "An unexpected error occurred" if settings.is_production else str(exc)
    return _error_response(
        500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
