"""
Core infrastructure for the trip planner admin backend: database sessions,
exceptions, error handlers, logging, password hashing and tokens.
"""

from .db import Base, SessionLocal, db_session, engine, get_db
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
    FormValidationError,
    InvalidTableQueryError,
    RecordNotFoundError,
    SerpApiException,
    TripAdminException,
    UnknownResourceError,
)

__all__ = [
    "Base",
    "SessionLocal",
    "db_session",
    "engine",
    "get_db",
    "AuthenticationError",
    "AuthorizationError",
    "ErrorCode",
    "FormValidationError",
    "InvalidTableQueryError",
    "RecordNotFoundError",
    "SerpApiException",
    "TripAdminException",
    "UnknownResourceError",
]
