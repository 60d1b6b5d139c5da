"""Exception handlers.

Every error response has the shape ``{"error": "<message>"}``.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from autoflow.api.middleware import SECURITY_HEADERS
from autoflow.config import settings

logger = structlog.get_logger()

# Detail Starlette gives a request that matches no route
ROUTE_NOT_FOUND_DETAIL = "Not Found"


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == ROUTE_NOT_FOUND_DETAIL:
        detail = "Endpoint not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as 400 Bad Request."""
    errors = exc.errors()
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        error_count=len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "; ".join(_describe(e) for e in errors) or "Invalid request",
            "details": jsonable_encoder(errors, exclude={"ctx", "input", "url"}),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions.

    Never expose internal error details outside development.
    """
    logger.exception(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": str(exc) if settings.debug else "Something went wrong",
        },
        # Built outside the middleware stack, so the hardening headers are added here
        headers={name.decode(): value.decode() for name, value in SECURITY_HEADERS},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
