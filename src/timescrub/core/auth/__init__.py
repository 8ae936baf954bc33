"""Authentication module for session tokens and password handling."""

from timescrub.core.auth.backend import (
    decode_token,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)
from timescrub.core.auth.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    get_principal,
    require_admin,
)
from timescrub.core.auth.middleware import RequestIdMiddleware, TenantContextMiddleware
from timescrub.core.auth.schemas import Principal, TokenResponse


__all__ = [
    # Dependencies
    "AdminPrincipal",
    "CurrentPrincipal",
    # Schemas
    "Principal",
    # Middleware
    "RequestIdMiddleware",
    "TenantContextMiddleware",
    "TokenResponse",
    # Token utilities
    "decode_token",
    "get_principal",
    # Password utilities
    "hash_password",
    "issue_token",
    "require_admin",
    "verify_password",
    "verify_token",
]
