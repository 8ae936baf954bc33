"""Employee service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from timescrub.api.dependencies import DBSession
from timescrub.core.audit.actions import ChangeKind, EntityType
from timescrub.core.audit.serialization import snapshot
from timescrub.core.audit.service import AuditRecorder
from timescrub.core.auth.backend import hash_password
from timescrub.core.auth.schemas import Principal
from timescrub.core.database.concurrency import ensure_version
from timescrub.core.database.session import transaction
from timescrub.core.errors import ConflictError, ValidationError
from timescrub.core.lifecycle import resolve_include_archived
from timescrub.core.lifecycle.service import LifecycleService
from timescrub.core.permissions.guard import require_role, require_tenant_ownership
from timescrub.core.permissions.roles import Role
from timescrub.modules.employees.models import Employee
from timescrub.modules.employees.repos import EmployeeRepository
from timescrub.modules.employees.schemas import EmployeeCreate, EmployeeUpdate


logger = structlog.get_logger()


class EmployeeService:
    """Service for employee management operations.

    Every mutation is admin-only, scoped to the admin's company and
    recorded in the audit log.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = EmployeeRepository(db)
        self.recorder = AuditRecorder(db)
        self.lifecycle = LifecycleService(db, self.recorder)

    async def get_employee(self, principal: Principal, employee_id: int) -> Employee:
        """Get an employee of the principal's company, archived or not.

        Raises:
            NotFoundError: If missing or in another company
        """
        employee = await self.repo.get_by_id(employee_id)
        return require_tenant_ownership(principal, employee, "employee", employee_id)

    async def get_me(self, principal: Principal) -> Employee:
        """Get the principal's own employee record."""
        return await self.get_employee(principal, principal.employee_id)

    async def list_employees(
        self,
        principal: Principal,
        include_archived: bool = False,
    ) -> list[Employee]:
        require_role(principal, Role.ADMIN)
        return await self.repo.list_by_company(
            principal.company_id,
            include_archived=resolve_include_archived(principal, include_archived),
        )

    async def create_employee(self, principal: Principal, data: EmployeeCreate) -> Employee:
        """Create an employee in the admin's company.

        Raises:
            ForbiddenError: If the principal is not an admin
            ConflictError: If the email is taken in any company
        """
        require_role(principal, Role.ADMIN)
        email = data.email.lower()
        await self._ensure_email_free(email)

        try:
            async with transaction(self.db):
                employee = await self.repo.create(
                    Employee(
                        company_id=principal.company_id,
                        email=email,
                        name=data.name,
                        role=data.role,
                        password_hash=hash_password(data.password),
                    )
                )
                await self.recorder.record_change(
                    principal,
                    EntityType.EMPLOYEE,
                    ChangeKind.CREATED,
                    employee.id,
                    before=None,
                    after=snapshot(employee),
                )
        except IntegrityError as e:
            # Another request took the email between the check and the insert
            raise self._email_taken(email) from e

        logger.info("employee_created", employee_id=employee.id, role=str(employee.role))
        return employee

    async def update_employee(
        self,
        principal: Principal,
        employee_id: int,
        data: EmployeeUpdate,
    ) -> Employee:
        """Update an employee's name, email or role.

        Raises:
            ForbiddenError: If the principal is not an admin
            NotFoundError: If the employee is missing or foreign
            ConflictError: On a taken email or a stale version
        """
        require_role(principal, Role.ADMIN)
        employee = await self.get_employee(principal, employee_id)
        ensure_version(employee, data.version, "employee")

        changes = data.model_dump(exclude_unset=True, exclude={"version"}, exclude_none=True)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
            if changes["email"] != employee.email:
                await self._ensure_email_free(changes["email"])

        before = snapshot(employee)
        try:
            async with transaction(self.db):
                for field, value in changes.items():
                    setattr(employee, field, value)
                employee = await self.repo.update(employee)
                await self.recorder.record_change(
                    principal,
                    EntityType.EMPLOYEE,
                    ChangeKind.UPDATED,
                    employee.id,
                    before=before,
                    after=snapshot(employee),
                )
        except IntegrityError as e:
            raise self._email_taken(changes.get("email", before["email"])) from e

        logger.info("employee_updated", employee_id=employee.id, fields=sorted(changes))
        return employee

    async def archive_employee(self, principal: Principal, employee_id: int) -> Employee:
        """Archive an employee. Admins cannot archive themselves.

        Raises:
            ValidationError: If the admin targets their own record
        """
        require_role(principal, Role.ADMIN)
        employee = await self.get_employee(principal, employee_id)
        if employee.id == principal.employee_id:
            raise ValidationError(
                "You cannot archive your own account.",
                error_code="cannot_archive_self",
            )
        return await self.lifecycle.archive(principal, employee, EntityType.EMPLOYEE)

    async def restore_employee(self, principal: Principal, employee_id: int) -> Employee:
        require_role(principal, Role.ADMIN)
        employee = await self.get_employee(principal, employee_id)
        return await self.lifecycle.restore(principal, employee, EntityType.EMPLOYEE)

    async def _ensure_email_free(self, email: str) -> None:
        if await self.repo.get_by_email(email):
            raise self._email_taken(email)

    @staticmethod
    def _email_taken(email: str) -> ConflictError:
        return ConflictError(
            "Email already registered",
            error_code="email_exists",
            details={"email": email},
        )


# Type alias for dependency injection
EmployeeSvc = Annotated[EmployeeService, Depends(EmployeeService)]
