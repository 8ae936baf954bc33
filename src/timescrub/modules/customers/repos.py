"""Customer repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.core.lifecycle import apply_visibility
from timescrub.modules.customers.models import Customer


class CustomerRepository:
    """Repository for Customer database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Customer | None:
        """Get a customer by ID, archived or not."""
        result = await self.session.execute(select(Customer).where(Customer.id == customer_id))
        return result.scalar_one_or_none()

    async def list_by_company(
        self,
        company_id: int,
        include_archived: bool = False,
    ) -> list[Customer]:
        """List a company's customers ordered by name."""
        stmt = select(Customer).where(Customer.company_id == company_id)
        stmt = apply_visibility(stmt, Customer, include_archived)
        result = await self.session.execute(stmt.order_by(Customer.name, Customer.id))
        return list(result.scalars().all())

    async def update(self, customer: Customer) -> Customer:
        await self.session.flush()
        await self.session.refresh(customer)
        return customer


CustomerRepo = Annotated[CustomerRepository, Depends(CustomerRepository)]
