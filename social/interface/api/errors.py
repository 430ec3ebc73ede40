"""Exception handlers shaping every failure into the error envelope.

    {"success": false, "error": {"message": "...", "type": "NOT_FOUND"}}
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException

from social.config import Settings
from social.domain.error import (
    ConflictError,
    DomainError,
    InvalidParentError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidParentError: status.HTTP_400_BAD_REQUEST,
    MaxDepthExceededError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
}

HTTP_ERROR_TYPES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
}


def error_response(
    status_code: int, message: str, error_type: str, **extra: object
) -> JSONResponse:
    """Build the error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {"message": message, "type": error_type, **extra},
        },
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the handlers on the application.

    Args:
        app: FastAPI application
        settings: Decides whether 500s may carry internal details
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = DOMAIN_ERROR_STATUS.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logfire.warn(
            "Domain error",
            error_type=exc.error_type,
            error=exc.message,
            status_code=status_code,
            path=request.url.path,
            method=request.method,
        )
        return error_response(status_code, exc.message, exc.error_type)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        logfire.warn(
            "Request validation failed",
            errors=[str(err.get("msg")) for err in errors],
            path=request.url.path,
            method=request.method,
        )
        if errors:
            first = errors[0]
            field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
            detail = first.get("msg", "Invalid value")
            message = f"{field}: {detail}" if field else detail
        else:
            message = "Invalid request"
        return error_response(
            status.HTTP_400_BAD_REQUEST, str(message), "VALIDATION_ERROR"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logfire.warn(
            "HTTP error",
            status_code=exc.status_code,
            detail=str(exc.detail),
            path=request.url.path,
            method=request.method,
        )
        return error_response(
            exc.status_code,
            str(exc.detail),
            HTTP_ERROR_TYPES.get(exc.status_code, "HTTP_ERROR"),
        )

    @app.exception_handler(PoolTimeoutError)
    async def pool_timeout_handler(
        request: Request, exc: PoolTimeoutError
    ) -> JSONResponse:
        logfire.error(
            "Timed out waiting for a database connection",
            path=request.url.path,
            _exc_info=exc,
        )
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Database is busy, please retry",
            "CONNECTION_TIMEOUT",
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.error(
            "Unhandled exception",
            error_class=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
            method=request.method,
            _exc_info=exc,
        )
        extra = {"details": str(exc)} if settings.expose_error_details else {}
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "INTERNAL_ERROR",
            **extra,
        )
