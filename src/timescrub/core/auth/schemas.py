"""Authentication schemas for token handling."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from timescrub.core.permissions.roles import Role


class Principal(BaseModel):
    """The authenticated identity carried by a session token.

    Passed explicitly into every domain operation. Nothing about it is
    stored server-side.

    Attributes:
        employee_id: The employee's id
        company_id: The id of the company the employee belongs to
        role: The employee's role at the time the token was issued
        expires_at: Token expiration time
    """

    model_config = ConfigDict(frozen=True)

    employee_id: int
    company_id: int
    role: Role
    expires_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenResponse(BaseModel):
    """Schema for a freshly issued session token.

    Attributes:
        access_token: Signed JWT for API access
        token_type: Always "bearer"
        expires_in: Token lifetime in seconds
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthenticatedEmployee(BaseModel):
    """The employee a token was issued to."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    company_id: int


class LoginResponse(TokenResponse):
    """Schema for a successful login."""

    employee: AuthenticatedEmployee
