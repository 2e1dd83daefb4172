"""Translate raised errors into the JSON error envelope.

Every error response has the shape ``{"detail", "code", "errors"?}``.
Client mistakes (bad input, unknown ids, uniqueness clashes) are logged at
INFO; anything that ends in a 5xx is logged at ERROR and never echoes its
message back to the caller.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hospital_directory.domain.errors import DomainError

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "An unexpected error occurred"

# Location segments FastAPI prepends to every validation error path
_LOCATION_PREFIXES = frozenset({"body", "query", "path"})

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _where(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def _envelope(
    status_code: int,
    detail: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """
    Map a DomainError to its status code via ``error_code``.

    Unknown codes are treated as client errors (400). Field-level details
    from ValidationError are passed through as ``errors``.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Server-side domain error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_where(request),
            },
        )
        return _envelope(status_code, GENERIC_SERVER_ERROR, exc.error_code)

    logger.info(
        "Request rejected",
        extra={"error_code": exc.error_code, "error_message": exc.message, **_where(request)},
    )
    payload = exc.to_dict()
    return _envelope(
        status_code,
        payload.get("message", str(exc)),
        payload.get("code", exc.error_code),
        payload.get("errors"),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Malformed input caught by FastAPI before any route code runs.

    Wrong types, pattern mismatches (hospital_type=Clinic, price_min=abc)
    and missing body fields all land here and share the 400 status used for
    domain validation.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in item["loc"] if part not in _LOCATION_PREFIXES),
            "message": item["msg"],
            "code": item["type"],
        }
        for item in exc.errors()
    ]

    logger.info("Malformed request", extra={"errors": errors, **_where(request)})

    return _envelope(
        status.HTTP_400_BAD_REQUEST, "Invalid request parameters", "VALIDATION_ERROR", errors
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """ValueError escaping a mapper or DTO constructor is bad input, not a crash."""
    logger.info("Invalid value", extra={"error_message": str(exc), **_where(request)})
    return _envelope(status.HTTP_400_BAD_REQUEST, str(exc), "INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, "error_message": str(exc), **_where(request)},
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR, "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers, most specific first; call once from build_app()."""
    handlers: list[tuple[type[Exception], Any]] = [
        (DomainError, handle_domain_error),
        (RequestValidationError, handle_request_validation_error),
        (ValueError, handle_value_error),
        (Exception, handle_unexpected_error),
    ]
    for exc_class, handler in handlers:
        app.add_exception_handler(exc_class, handler)

    logger.debug("Exception handlers registered", extra={"count": len(handlers)})
