"""Translate errors raised while serving a request into JSON responses.

Every error response has the same body:

    {"detail": "<message>", "code": "<ERROR_CODE>", "errors": [...]}

``errors`` is only present for field-level validation failures.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_compare.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

STATUS_CODE_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Request parts FastAPI prefixes to a validation error location
_LOCATION_PARTS = {"body", "query", "path"}


def _error_response(
    status_code: int, detail: str, code: str, errors: list[Any] | None = None
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def _request_extra(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the status its code maps to (400 if unmapped).

    Server-side failures are logged at error level with their context,
    client errors at info.
    """
    status_code = STATUS_CODE_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    extra = {"error_code": exc.error_code, "error_message": exc.message, **_request_extra(request)}

    if status_code >= 500:
        logger.error("Domain error occurred", extra={**extra, "context": exc.context})
    else:
        logger.info("Client error", extra=extra)

    errors = exc.errors if isinstance(exc, ValidationError) else None
    return _error_response(status_code, exc.message, exc.error_code, errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's parameter validation failures as field errors.

    ``?only_differences=maybe`` becomes
    ``{"field": "only_differences", "message": ..., "code": "bool_parsing"}``.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part not in _LOCATION_PARTS),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_extra(request)})

    return _error_response(422, "Invalid request parameters", "VALIDATION_ERROR", errors)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback and answer with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_extra(request),
        },
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on app. Call once, from build_app()."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
