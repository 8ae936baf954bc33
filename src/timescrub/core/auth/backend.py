"""Authentication backend for JWT and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- Session token creation and verification
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from timescrub.config import settings
from timescrub.core.auth.schemas import Principal
from timescrub.core.constants import ACCESS_TOKEN_JTI_LENGTH, BCRYPT_ROUNDS
from timescrub.core.errors import InvalidCredentialError, UnauthenticatedError
from timescrub.core.permissions.roles import Role


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# Session Token Utilities
# ============================================================


def issue_token(
    employee_id: int,
    company_id: int,
    role: Role,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token for an employee.

    Args:
        employee_id: The employee's id
        company_id: The employee's company id
        role: The employee's role
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode: dict[str, Any] = {
        "sub": str(employee_id),
        "company_id": company_id,
        "role": str(role),
        "type": "access",
        "iat": now,
        "exp": now + expires_delta,
        "jti": secrets.token_urlsafe(ACCESS_TOKEN_JTI_LENGTH),
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> Principal | None:
    """Decode and validate a session token.

    Args:
        token: The JWT to decode

    Returns:
        Principal if valid, None on a bad signature, expiry, missing
        claims or an unknown role
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )

        employee_id = payload.get("sub")
        company_id = payload.get("company_id")
        role = payload.get("role")
        exp = payload.get("exp")

        if payload.get("type", "access") != "access":
            return None
        if employee_id is None or company_id is None or role is None or exp is None:
            return None

        return Principal(
            employee_id=int(employee_id),
            company_id=int(company_id),
            role=Role(role),
            expires_at=datetime.fromtimestamp(exp, tz=UTC),
        )

    except (JWTError, ValueError, TypeError):
        return None


def verify_token(token: str | None) -> Principal:
    """Turn a presented credential into a principal or fail.

    Args:
        token: The raw bearer token, or None when none was sent

    Returns:
        The authenticated principal

    Raises:
        UnauthenticatedError: If no token was presented
        InvalidCredentialError: If the token does not verify
    """
    if not token:
        raise UnauthenticatedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    principal = decode_token(token)
    if principal is None:
        raise InvalidCredentialError(
            "Invalid or expired token",
            error_code="invalid_token",
        )
    return principal
