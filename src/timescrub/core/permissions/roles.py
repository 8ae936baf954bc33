"""Employee roles."""

from enum import StrEnum


class Role(StrEnum):
    """Closed set of roles an employee can hold within their company."""

    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"
