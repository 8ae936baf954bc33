"""Employee repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import func, select

from timescrub.api.dependencies import DBSession
from timescrub.core.lifecycle import apply_visibility
from timescrub.modules.employees.models import Employee


class EmployeeRepository:
    """Repository for Employee database operations.

    Lookups by id are not tenant-scoped; callers pass the result through
    the access guard so foreign rows surface as not found.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee.

        Args:
            employee: Employee instance to create

        Returns:
            The created employee with ID populated
        """
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def get_by_id(self, employee_id: int) -> Employee | None:
        """Get an employee by ID, archived or not."""
        result = await self.session.execute(select(Employee).where(Employee.id == employee_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Employee | None:
        """Get an employee by email across all companies.

        Emails are compared case-insensitively.
        """
        stmt = select(Employee).where(func.lower(Employee.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_company(
        self,
        company_id: int,
        include_archived: bool = False,
    ) -> list[Employee]:
        """List a company's employees ordered by name.

        Args:
            company_id: The company's id
            include_archived: Whether archived employees are listed too

        Returns:
            Employees of the company
        """
        stmt = select(Employee).where(Employee.company_id == company_id)
        stmt = apply_visibility(stmt, Employee, include_archived)
        result = await self.session.execute(stmt.order_by(Employee.name, Employee.id))
        return list(result.scalars().all())

    async def update(self, employee: Employee) -> Employee:
        """Flush pending changes to an employee and reload it."""
        await self.session.flush()
        await self.session.refresh(employee)
        return employee


# Type alias for dependency injection
EmployeeRepo = Annotated[EmployeeRepository, Depends(EmployeeRepository)]
