"""Company repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from timescrub.api.dependencies import DBSession
from timescrub.modules.companies.models import Company


class CompanyRepository:
    """Repository for Company database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, company: Company) -> Company:
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def get_by_id(self, company_id: int) -> Company | None:
        result = await self.session.execute(select(Company).where(Company.id == company_id))
        return result.scalar_one_or_none()


CompanyRepo = Annotated[CompanyRepository, Depends(CompanyRepository)]
