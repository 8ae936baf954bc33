"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and validating session tokens
- Resolving the current principal
- Requiring the admin role
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from timescrub.core.auth.schemas import Principal
from timescrub.core.permissions.guard import require_authenticated, require_role
from timescrub.core.permissions.roles import Role


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Principal:
    """Resolve the Authorization header to a principal.

    Args:
        credentials: Bearer token credentials from the request

    Returns:
        The authenticated principal

    Raises:
        UnauthenticatedError: If the token is missing
        InvalidCredentialError: If the token is invalid or expired
    """
    return require_authenticated(credentials.credentials if credentials else None)


async def require_admin(
    principal: Annotated[Principal, Depends(get_principal)],
) -> Principal:
    """Get the current principal, ensuring they are an admin.

    Raises:
        ForbiddenError: If the principal is not an admin
    """
    return require_role(principal, Role.ADMIN)


# Type aliases for cleaner dependency injection
CurrentPrincipal = Annotated[Principal, Depends(get_principal)]
AdminPrincipal = Annotated[Principal, Depends(require_admin)]
