"""Error handling module with RFC 7807 Problem Details."""

from timescrub.core.errors.exceptions import (
    AppException,
    ConflictError,
    ForbiddenError,
    InvalidCredentialError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from timescrub.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "ConflictError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "InvalidCredentialError",
    "NotFoundError",
    "ProblemDetail",
    "UnauthenticatedError",
    "ValidationError",
    "register_exception_handlers",
]
