"""Authentication service for login."""

from typing import Annotated

import structlog
from fastapi import Depends

from timescrub.api.dependencies import DBSession
from timescrub.config import settings
from timescrub.core.auth.backend import issue_token, verify_password
from timescrub.core.auth.schemas import TokenResponse
from timescrub.core.errors import InvalidCredentialError
from timescrub.core.lifecycle import is_archived
from timescrub.modules.employees.models import Employee
from timescrub.modules.employees.repos import EmployeeRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.employee_repo = EmployeeRepository(db)

    async def login(self, email: str, password: str) -> tuple[Employee, TokenResponse]:
        """Authenticate an employee with email and password.

        The company is resolved from the email, which is unique across
        companies. Archived employees cannot log in.

        Args:
            email: Employee's email address
            password: Plain text password

        Returns:
            Tuple of (employee, token)

        Raises:
            InvalidCredentialError: If the credentials are wrong or the employee is archived
        """
        employee = await self.employee_repo.get_by_email(email)

        if employee is None or not verify_password(password, employee.password_hash):
            logger.info("login_failed", reason="bad_credentials")
            raise InvalidCredentialError(
                "Invalid credentials",
                error_code="invalid_credentials",
            )

        if is_archived(employee):
            logger.info("login_failed", reason="archived", employee_id=employee.id)
            raise InvalidCredentialError(
                "Invalid credentials",
                error_code="invalid_credentials",
            )

        token = issue_token(employee.id, employee.company_id, employee.role)
        logger.info("login_succeeded", employee_id=employee.id, company_id=employee.company_id)

        return employee, TokenResponse(
            access_token=token,
            expires_in=settings.access_token_expire_minutes * 60,
        )


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
