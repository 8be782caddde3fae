"""
Exception handlers that render failures into the standard error envelope.

Admin pages raise ``TripAdminException`` subclasses; everything else that
escapes a route (framework HTTP errors, request validation, integrity
violations, bugs) is mapped onto an ``ErrorCode`` here.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from datetime import datetime
from typing import Dict, Any, List, Optional

from tripadmin.core.exceptions import TripAdminException, ErrorCode
from tripadmin.schemas.base import StandardErrorResponse

logger = logging.getLogger(__name__)

HTTP_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.NOT_AUTHENTICATED,
    403: ErrorCode.NOT_AUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class ErrorHandler:
    """Renders error envelopes and counts failures per error code."""

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    def respond(
        self,
        request: Request,
        error_code: ErrorCode,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        self.error_counts[error_code.value] = self.error_counts.get(error_code.value, 0) + 1
        self.last_error_time[error_code.value] = time.time()

        body = StandardErrorResponse(
            error_code=error_code.value,
            message=message,
            details=details,
            request_id=_request_id(request),
            timestamp=datetime.utcnow(),
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    async def handle_trip_admin_exception(self, request: Request, exc: TripAdminException) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "request_id": _request_id(request),
                "error_code": exc.error_code.value,
                "status_code": exc.status_code,
            },
        )
        return self.respond(request, exc.error_code, exc.message, exc.status_code, exc.details)

    async def handle_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        errors: List[Dict[str, str]] = [
            {
                "field": ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path")),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Request validation failed on {request.url.path}",
            extra={"request_id": _request_id(request), "validation_errors": errors},
        )
        return self.respond(
            request,
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            422,
            {"validation_errors": errors},
        )

    async def handle_http_exception(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code = HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
        return self.respond(request, code, str(exc.detail), exc.status_code)

    async def handle_integrity_error(self, request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning(
            f"Integrity violation on {request.method} {request.url.path}: {exc.orig}",
            extra={"request_id": _request_id(request)},
        )
        return self.respond(
            request,
            ErrorCode.CONFLICT,
            "The record conflicts with existing data",
            409,
        )

    async def handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=exc,
            extra={"request_id": _request_id(request)},
        )
        return self.respond(
            request,
            ErrorCode.INTERNAL_SERVER_ERROR,
            "An internal server error occurred",
            500,
        )

    def get_error_statistics(self) -> Dict[str, Any]:
        hour_ago = time.time() - 3600
        return {
            "error_counts": dict(self.error_counts),
            "recent_errors": [
                code for code, seen in self.last_error_time.items() if seen >= hour_ago
            ],
            "total_errors": sum(self.error_counts.values()),
        }


error_handler = ErrorHandler()


def setup_error_handlers(app):
    app.add_exception_handler(TripAdminException, error_handler.handle_trip_admin_exception)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    app.add_exception_handler(IntegrityError, error_handler.handle_integrity_error)
    app.add_exception_handler(Exception, error_handler.handle_unexpected_exception)
