"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Also raised for resources owned by another company, so that callers
    cannot tell a foreign id from a missing one.

    Example:
        raise NotFoundError("Customer not found", resource="customer", resource_id="42")
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("Email already registered", details={"email": email})
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid input data",
            errors=[{"field": "end", "message": "end must not be before start"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthenticatedError(AppException):
    """Raised when no credential was presented.

    Example:
        raise UnauthenticatedError("Missing authentication token", error_code="missing_token")
    """

    message = "Authentication required"
    error_code = "unauthenticated"
    status_code = 401


class InvalidCredentialError(AppException):
    """Raised when a presented credential fails verification.

    Covers bad token signatures, expired tokens, malformed claims and
    wrong email/password pairs at login.
    """

    message = "Invalid credentials"
    error_code = "invalid_credential"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when the principal lacks the role required for an operation.

    Example:
        raise ForbiddenError("Admin access required", details={"required_role": "ADMIN"})
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403
