"""Core services and cross-cutting concerns."""

from timescrub.core.database import Base, get_db
from timescrub.core.errors import (
    AppException,
    ConflictError,
    ForbiddenError,
    InvalidCredentialError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
    register_exception_handlers,
)


__all__ = [
    # Errors
    "AppException",
    # Database
    "Base",
    "ConflictError",
    "ForbiddenError",
    "InvalidCredentialError",
    "NotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "get_db",
    "register_exception_handlers",
]
