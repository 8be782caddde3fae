"""
Custom exceptions for the trip planner admin backend.
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Admin panel errors
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    INVALID_TABLE_QUERY = "INVALID_TABLE_QUERY"
    CONFLICT = "CONFLICT"

    # Authentication errors
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # External services
    SERP_API_ERROR = "SERP_API_ERROR"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TripAdminException(Exception):
    """Base exception for the trip planner admin backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class UnknownResourceError(TripAdminException):
    """Raised when no admin resource is registered under a slug."""

    def __init__(self, slug: str):
        super().__init__(
            message=f"Admin resource '{slug}' does not exist",
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
            details={"resource": slug},
            status_code=404
        )


class RecordNotFoundError(TripAdminException):
    """Raised when a record addressed by id does not exist."""

    def __init__(self, resource: str, record_id: Any):
        super().__init__(
            message=f"{resource} record {record_id} not found",
            error_code=ErrorCode.RECORD_NOT_FOUND,
            details={"resource": resource, "record": record_id},
            status_code=404
        )


class FormValidationError(TripAdminException):
    """Raised when submitted form data fails validation."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(
            message="The given data was invalid",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"validation_errors": errors},
            status_code=422
        )

    def fields(self) -> set:
        return {error["field"] for error in self.errors}


class InvalidTableQueryError(TripAdminException):
    """Raised when list page query parameters name unknown or disabled columns."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_TABLE_QUERY,
            details=details,
            status_code=400
        )


class AuthenticationError(TripAdminException):
    """Raised when a request carries no valid bearer token."""

    def __init__(self, message: str = "Unauthenticated"):
        super().__init__(
            message=message,
            error_code=ErrorCode.NOT_AUTHENTICATED,
            status_code=401
        )


class AuthorizationError(TripAdminException):
    """Raised when an authenticated user may not access the admin panel."""

    def __init__(self, message: str = "This action is unauthorized"):
        super().__init__(
            message=message,
            error_code=ErrorCode.NOT_AUTHORIZED,
            status_code=403
        )


class SerpApiException(Exception):
    """
    Error raised by SerpAPI integrations.

    Carries a numeric code and a context mapping with diagnostic detail.
    Wrap an underlying error with ``raise SerpApiException(...) from exc``
    or by passing it as ``previous``.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        context: Optional[Dict[str, Any]] = None,
        previous: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = dict(context or {})
        if previous is not None:
            self.__cause__ = previous

    @property
    def previous(self) -> Optional[BaseException]:
        return self.__cause__

    def get_context(self) -> Dict[str, Any]:
        return self.context
