"""Pydantic schemas for employee operations."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from timescrub.core.constants import (
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from timescrub.core.permissions.roles import Role
from timescrub.modules.companies.schemas import CompanySummary


# ============================================================
# Password Validation
# ============================================================

# Password complexity rules: (regex pattern, human-readable name)
PASSWORD_COMPLEXITY_RULES: list[tuple[str, str]] = [
    (r"[A-Z]", "uppercase letter"),
    (r"[a-z]", "lowercase letter"),
    (r"\d", "digit"),
]


def validate_password_complexity(password: str) -> str:
    """Validate password meets complexity requirements.

    Requirements:
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit

    Raises:
        ValueError: If password doesn't meet requirements
    """
    missing = [
        name
        for pattern, name in PASSWORD_COMPLEXITY_RULES
        if not re.search(pattern, password)
    ]

    if missing:
        if len(missing) == 1:
            raise ValueError(f"Password must contain at least one {missing[0]}")
        raise ValueError(f"Password must contain at least one: {', '.join(missing)}")

    return password


# ============================================================
# Employee Schemas
# ============================================================


class EmployeeCreate(BaseModel):
    """Schema for creating an employee."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    role: Role = Role.EMPLOYEE

    @field_validator("password")
    @classmethod
    def password_complexity(cls, v: str) -> str:
        """Validate password complexity."""
        return validate_password_complexity(v)


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee. Omitted fields are left unchanged."""

    email: EmailStr | None = None
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    role: Role | None = None
    version: int | None = Field(None, description="Version the client last read")


class EmployeeSummary(BaseModel):
    """Minimal employee reference embedded in other responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class EmployeeResponse(BaseModel):
    """Schema for employee response. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    email: str
    name: str
    role: Role
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    deleted_by: int | None
    version: int


class MeResponse(BaseModel):
    """The authenticated employee with their company."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: Role
    company_id: int
    company: CompanySummary
